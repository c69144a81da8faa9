"""
Configuration Validators
========================

Startup checks for ``intellibuy.config``. Each issue string starts with its
severity (``CRITICAL:``, ``WARNING:`` or ``INFO:``) and is logged at the
matching level. CRITICAL issues abort startup in production only.

Called automatically via core.apps.CoreConfig.ready().
"""

import logging
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

SEVERITY_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
}


def issue_severity(issue: str) -> str:
    severity = issue.split(":", 1)[0]
    return severity if severity in SEVERITY_LEVELS else "INFO"


def validate_config_on_startup(app_config=None):
    """
    Log every configuration issue; raise ImproperlyConfigured if a CRITICAL
    issue is found while running in production.
    """
    if app_config is None:
        from intellibuy.config import config as app_config

    issues = app_config.validate()
    if not issues:
        logger.info("Configuration validated, no issues found")
        return

    for issue in issues:
        logger.log(SEVERITY_LEVELS[issue_severity(issue)], issue)

    critical = [issue for issue in issues if issue_severity(issue) == "CRITICAL"]
    if critical and app_config.is_production:
        raise ImproperlyConfigured(
            f"{app_config.environment} configuration is unsafe:\n"
            + "\n".join(f"  - {issue}" for issue in critical)
        )
