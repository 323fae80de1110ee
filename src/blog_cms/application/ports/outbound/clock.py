"""时钟端口：返回当前时间（带时区）的可调用对象"""

from collections.abc import Callable
from datetime import datetime

Clock = Callable[[], datetime]
