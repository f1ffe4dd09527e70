from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass

from weatherstation.models.weather import Alert, Reading

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlertRule:
    alert_type: str
    message: str
    triggered: Callable[[Reading], bool]


ALERT_RULES: tuple[AlertRule, ...] = (
    AlertRule(
        "Extreme Cold Warning",
        "Dangerously cold temperatures expected",
        lambda r: r.temperature < -15,
    ),
    AlertRule(
        "Heat Warning",
        "Extreme heat expected, risk of heat stroke",
        lambda r: r.temperature > 35,
    ),
    AlertRule(
        "High Wind Warning",
        "Damaging winds expected, secure loose objects",
        lambda r: r.wind_speed > 60,
    ),
    AlertRule(
        "Storm Warning",
        "Low pressure system detected, possible storm approaching",
        lambda r: r.pressure < 980,
    ),
)


class WeatherAlertSystem:
    def __init__(self, *, rules: tuple[AlertRule, ...] = ALERT_RULES) -> None:
        self._rules = rules
        self._lock = threading.Lock()
        self._alerts: list[Alert] = []

    def check_for_alerts(self, reading: Reading) -> list[Alert]:
        """Evaluate every rule against ``reading``; each match issues one alert."""
        issued: list[Alert] = []
        for rule in self._rules:
            if rule.triggered(reading):
                issued.append(self._issue(rule, reading))
        return issued

    def _issue(self, rule: AlertRule, reading: Reading) -> Alert:
        alert = Alert(
            alert_type=rule.alert_type,
            message=rule.message,
            issued_at=reading.timestamp,
        )
        with self._lock:
            self._alerts.append(alert)
        logger.warning("WEATHER ALERT: %s - %s", alert.alert_type, alert.message)
        return alert

    def active_alerts(self) -> list[Alert]:
        with self._lock:
            return list(self._alerts)

    def expire_all(self) -> int:
        expired = 0
        with self._lock:
            for alert in self._alerts:
                if not alert.expired:
                    alert.expire()
                    expired += 1
        return expired
