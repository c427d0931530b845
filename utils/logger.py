import json
import os
import time
from datetime import datetime
from typing import Optional, Dict, Any
import logging
import threading

# Configure standard logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

LOG_ROTATION_SIZE = 10 * 1024 * 1024  # 10MB
LOG_ROTATION_KEEP = 5


class LoggerClient:
    def __init__(self, log_file: Optional[str] = None):
        """
        Initialize the logger client.

        Args:
            log_file: Path of the JSON-lines log file (optional, falls back to the LOG_FILE_PATH env var;
                      console-only when neither is set)
        """
        self.log_file = log_file or os.getenv('LOG_FILE_PATH')

        # Ensure log directory exists
        if self.log_file and os.path.dirname(self.log_file):
            os.makedirs(os.path.dirname(self.log_file), exist_ok=True)

        # Lock for thread-safe file operations
        self.file_lock = threading.Lock()

    def _rotate_logs_if_needed(self):
        """Rotate log file if it exceeds the maximum size"""
        try:
            if os.path.exists(self.log_file) and os.path.getsize(self.log_file) > LOG_ROTATION_SIZE:
                timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
                rotated_file = f"{self.log_file}.{timestamp}"
                os.rename(self.log_file, rotated_file)
                logger.info(f"Rotated log file to {rotated_file}")

                # Keep only the most recent log files
                log_dir = os.path.dirname(self.log_file) or "."
                base_name = os.path.basename(self.log_file)
                log_files = [f for f in os.listdir(log_dir) if f.startswith(base_name) and f != base_name]
                log_files.sort(reverse=True)

                for old_file in log_files[LOG_ROTATION_KEEP:]:
                    os.remove(os.path.join(log_dir, old_file))
                    logger.info(f"Deleted old log file: {old_file}")
        except OSError as e:
            logger.error(f"Failed to rotate logs: {e}", exc_info=True)

    def _write_to_file(self, log_entry: Dict[str, Any]):
        """Write a log entry to the file"""
        try:
            # Use a lock to ensure thread safety
            with self.file_lock:
                self._rotate_logs_if_needed()

                with open(self.log_file, 'a') as f:
                    f.write(json.dumps(log_entry, default=str) + "\n")
        except OSError as e:
            logger.error(f"Failed to write log to file: {e}", exc_info=True)

    def _build_entry(self, log_type: str, message: str, context: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        return {
            "timestamp": datetime.now().isoformat(),
            "unix_timestamp": int(time.time()),
            "type": log_type,
            "message": message,
            "context": context or {}
        }

    async def log(self,
                  log_type: str,
                  message: str,
                  context: Optional[Dict[str, Any]] = None) -> bool:
        """
        Print a log entry and append it to the local log file.

        Args:
            log_type: Type of log (error, access, or info)
            message: The log message
            context: Optional dictionary of additional context

        Returns:
            bool: True if logging was successful
        """
        print(f"[{log_type}] {message}")

        if self.log_file:
            # Use a thread to avoid blocking the event loop
            threading.Thread(
                target=self._write_to_file,
                args=(self._build_entry(log_type, message, context),),
                daemon=True
            ).start()

        return True

    def log_sync(self, log_type: str, message: str, context: Optional[Dict[str, Any]] = None) -> bool:
        """
        Synchronous version of log method.

        Args:
            log_type: Type of log (error, access, or info)
            message: The log message
            context: Optional dictionary of additional context

        Returns:
            bool: True if logging was successful
        """
        print(f"[{log_type}] {message}")

        if self.log_file:
            self._write_to_file(self._build_entry(log_type, message, context))
        return True
