# dummygen/core/logging.py
import logging
import json
import sys
from datetime import datetime, timezone
from typing import Any, Dict

logger = logging.getLogger("dummygen")

SAFE_ATTR_BLOCKLIST = {
    "args","asctime","created","exc_info","exc_text","filename",
    "funcName","levelname","levelno","lineno","module","msecs",
    "message","msg","name","pathname","process","processName",
    "relativeCreated","stack_info","thread","threadName","taskName",
}

class JsonFormatter(logging.Formatter):
    """
    One JSON object per line:
    {
      "ts": "2026-10-18T01:23:45.678Z",
      "ts_ms": 1792286625678,
      "level": "INFO",
      "logger": "access",
      "msg": "request_done",
      "req_id": "...",
      "method": "POST",
      "path": "/generate",
      "status": 200,
      "latency_ms": 3,
      ... (extra)
    }
    """
    def format(self, record: logging.LogRecord) -> str:
        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "ts": now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "ts_ms": int(now.timestamp() * 1000),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        for k, v in record.__dict__.items():
            if k in SAFE_ATTR_BLOCKLIST:
                continue
            # trace_id is published under the standard key
            if k == "trace_id" and "req_id" not in payload:
                payload["req_id"] = v
            else:
                payload[k] = v

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        try:
            return json.dumps(payload, ensure_ascii=False, default=str)
        except TypeError:
            safe = {k: (str(v) if not isinstance(v, (str, int, float, bool, type(None), dict, list)) else v)
                    for k, v in payload.items()}
            return json.dumps(safe, ensure_ascii=False)

def configure_logging(level: str = "INFO") -> None:
    """
    - Route the root and uvicorn loggers through JsonFormatter
    - Write to stdout
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.addHandler(handler)
        lg.propagate = False
        lg.setLevel(level.upper())

def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
