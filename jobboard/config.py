from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Required from environment (.env / deployment secrets)
    database_url: str
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days
    app_env: str = "development"  # development, staging, production

    # CORS origins as comma-separated values
    # Example: "https://app.example.com,https://admin.example.com"
    cors_allow_origins: str = "http://localhost:3000"

    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # Blob storage (S3) for logos, profile photos and portfolio files
    aws_region: str = "us-east-1"
    blob_bucket: str = "jobboard-uploads"
    # Public URL prefix for stored objects; defaults to the bucket's virtual-hosted URL
    blob_public_base_url: str | None = None

    # Upload guards
    max_upload_mb: int = 10

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
