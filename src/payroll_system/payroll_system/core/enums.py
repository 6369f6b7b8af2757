from __future__ import annotations

from enum import Enum


class WorkerType(str, Enum):
    """Loại hợp đồng lao động, quyết định công thức tính lương."""

    SALARIED = "Salaried"
    HOURLY = "Hourly"
    CONTRACTOR = "Contractor"


class AttendanceStatus(str, Enum):
    """Trạng thái chấm công chuẩn hoá lưu trong CSDL."""

    PRESENT = "Present"
    LATE = "Late"
    ABSENT = "Absent"
    ON_BREAK = "On Break"
    AUTO_CLOCK_OUT = "Auto Clock-out"


class VarianceType(str, Enum):
    INCREASE = "increase"
    DECREASE = "decrease"
    NEW = "new"


class VarianceSeverity(str, Enum):
    """Mức độ chênh lệch lương thực nhận giữa hai kỳ."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
