"""
Configuration Validators
========================

Startup validation for the Quill configuration layer.
Raises ImproperlyConfigured for critical issues in production,
logs everything else.

Called automatically via core.apps.CoreConfig.ready().
"""

import logging
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


def validate_config_on_startup():
    """
    Validate all configuration on application startup.

    Production:
        CRITICAL issues raise ImproperlyConfigured (hard failure).

    Elsewhere:
        Issues are only logged.
    """
    from quill.config import config

    issues = config.validate()

    if not issues:
        logger.info("Configuration validated, no issues found")
        return

    critical_issues = [i for i in issues if i.startswith("CRITICAL")]

    for issue in issues:
        if issue.startswith("CRITICAL"):
            logger.critical(issue)
        elif issue.startswith("WARNING"):
            logger.warning(issue)
        else:
            logger.info(issue)

    if config.is_production and critical_issues:
        raise ImproperlyConfigured(
            "Configuration validation failed in production:\n"
            + "\n".join(f"  • {i}" for i in critical_issues)
        )
