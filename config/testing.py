SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORE_BACKEND = "memory"
MONGO_URI = "mongodb://localhost:27017"
MONGO_DB_NAME = "ops_dashboard_test"

CLOUDINARY_CLOUD_NAME = ""
CLOUDINARY_UPLOAD_PRESET = ""
CLOUDINARY_API_KEY = ""
CLOUDINARY_API_SECRET = ""

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD_HASH = ""
ADMIN_PASSWORD = "admin123"
SESSION_MAX_AGE_HOURS = 12

DAY_RATE = 400
CASCADE_WORKERS = 4
