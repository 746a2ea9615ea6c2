import os


class Config:
    """Giá trị mặc định dùng chung; các module development/production/testing ghi đè khi cần."""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "khoa_bi_mat_cua_nhom"
    DEBUG = bool(int(os.environ.get("DEBUG", "0")))
    SEED_DEMO_DATA = bool(int(os.environ.get("SEED_DEMO_DATA", "1")))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    HOST = os.environ.get("HOST", "127.0.0.1")
    PORT = int(os.environ.get("PORT", "5000"))
