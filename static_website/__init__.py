"""Static website infrastructure: private S3 bucket behind CloudFront."""
