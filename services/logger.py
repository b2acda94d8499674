# services/logger.py
import logging
import os
from logging.handlers import RotatingFileHandler


class AppLogger:
    """統一日誌管理系統"""

    _loggers = {}

    @classmethod
    def get_logger(cls, name: str = "rentease") -> logging.Logger:
        """取得或建立 logger 實例"""
        if name in cls._loggers:
            return cls._loggers[name]

        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, os.getenv('LOG_LEVEL', 'INFO').upper(), logging.INFO))

        # 避免重複添加 handler
        if logger.handlers:
            return logger

        formatter = logging.Formatter(
            '[%(asctime)s] %(levelname)-8s [%(name)s:%(funcName)s:%(lineno)d] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        # File Handler（自動輪轉，最多保留 5 個檔案，每個 10MB）
        if os.getenv('LOG_TO_FILE', 'true').lower() == 'true':
            log_dir = os.getenv('LOG_DIR', 'logs')
            os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, 'app.log'),
                maxBytes=10*1024*1024,  # 10MB
                backupCount=5,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        cls._loggers[name] = logger
        return logger


# 建立全域 logger
logger = AppLogger.get_logger()


def log_storage_operation(operation: str, key: str, success: bool,
                          row_count: int = None, error: str = None):
    """記錄 local storage 讀寫"""
    if success:
        msg = f"Storage {operation} on {key}"
        if row_count is not None:
            msg += f" ({row_count} records)"
        logger.debug(msg)
    else:
        logger.error(f"Storage {operation} failed on {key} - {error}")


def log_user_action(action: str, details=None):
    """記錄使用者操作"""
    msg = f"User action: {action}"
    if details:
        msg += f" - {details}"
    logger.info(msg)
