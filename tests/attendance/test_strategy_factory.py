from src.payroll_system.payroll_system.attendance.factory import AttendanceStrategyFactory
from src.payroll_system.payroll_system.attendance.model import AttendanceRulesConfig
from src.payroll_system.payroll_system.attendance.strategies.late_strategy import LateStrategy
from src.payroll_system.payroll_system.attendance.strategies.present_strategy import PresentStrategy


def test_factory_checkin_without_shift_is_present():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(late_minutes=None, rules=AttendanceRulesConfig())

    assert isinstance(strategy, PresentStrategy)


def test_factory_checkin_on_time_within_grace():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(late_minutes=5, rules=AttendanceRulesConfig(grace_minutes=5))

    assert isinstance(strategy, PresentStrategy)


def test_factory_checkin_late_after_grace():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(late_minutes=6, rules=AttendanceRulesConfig(grace_minutes=5))

    assert isinstance(strategy, LateStrategy)
    assert strategy.decide_checkin(late_minutes=6).late_minutes == 6
