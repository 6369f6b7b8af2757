import os


def get_settings_module() -> str:
    # Lấy giá trị môi trường từ biến APP_ENV, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    # Mặc định trả về Development cho tất cả các trường hợp còn lại
    return "config.development"


def attendance_rules_from_env() -> dict:
    """Company-wide overrides for the attendance rule defaults.

    Only variables that are actually set are returned, so unset ones keep the
    engine defaults.
    """
    overrides = {}
    for key, env_name, cast in (
        ("grace_minutes", "ATTENDANCE_GRACE_MINUTES", int),
        ("half_day_threshold_hours", "ATTENDANCE_HALF_DAY_THRESHOLD_HOURS", float),
        ("auto_absent_after_hours", "ATTENDANCE_AUTO_ABSENT_AFTER_HOURS", float),
        ("max_break_minutes", "ATTENDANCE_MAX_BREAK_MINUTES", int),
        ("overtime_after_minutes", "ATTENDANCE_OVERTIME_AFTER_MINUTES", int),
    ):
        value = os.getenv(env_name)
        if value not in (None, ""):
            overrides[key] = cast(value)

    weekend = os.getenv("ATTENDANCE_WEEKEND_DAYS")
    if weekend:
        overrides["weekend_days"] = frozenset(int(d) for d in weekend.split(",") if d.strip())
    return overrides
