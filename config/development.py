import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Thư mục chứa một file JSON cho mỗi khoá lưu trữ
DATA_DIR = os.getenv("DATA_DIR", "data")
STORE_KEY = os.getenv("STORE_KEY", "academia-system-db")

# Độ trễ giả lập cho mỗi thao tác directory (giây)
API_LATENCY_SECONDS = float(os.getenv("API_LATENCY_SECONDS", "0.5"))

DEBUG = True

# Nếu bật, app sẽ tạo store rỗng khi khởi động nếu chưa có
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Tuỳ chọn: tạo thêm tài khoản demo khi khởi động
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
