import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# mongo | memory
STORE_BACKEND = os.getenv("STORE_BACKEND", "mongo")
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "ops_dashboard")

CLOUDINARY_CLOUD_NAME = os.getenv("CLOUDINARY_CLOUD_NAME", "")
CLOUDINARY_UPLOAD_PRESET = os.getenv("CLOUDINARY_UPLOAD_PRESET", "")
CLOUDINARY_API_KEY = os.getenv("CLOUDINARY_API_KEY", "")
# Without the secret, image deletion during employee cascade is reported as unavailable.
CLOUDINARY_API_SECRET = os.getenv("CLOUDINARY_API_SECRET", "")

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH", "")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
SESSION_MAX_AGE_HOURS = float(os.getenv("SESSION_MAX_AGE_HOURS", "12"))

DAY_RATE = float(os.getenv("DAY_RATE", "400"))
CASCADE_WORKERS = int(os.getenv("CASCADE_WORKERS", "8"))
