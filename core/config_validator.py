# core/config_validator.py

from typing import List
from core.config import settings
from core.logging_config import logger
from core.navigation import build_navigation
from core.permission_helpers import permitted_paths
from core.permissions import RESOURCE_LABELS, ROLE_RESOURCES
from models.auth import Session
from models.enums import Role, Resource


def validate_required_config() -> List[str]:
    """
    Validate that all required environment variables are set.
    Returns list of missing required variables.
    """
    missing = []

    if not settings.SUPABASE_URL:
        missing.append("SUPABASE_URL")
    if not settings.SUPABASE_SERVICE_ROLE_KEY:
        missing.append("SUPABASE_SERVICE_ROLE_KEY")
    if not settings.SESSION_SECRET_KEY:
        missing.append("SESSION_SECRET_KEY")

    return missing


def validate_optional_config() -> List[str]:
    """
    Validate optional but recommended configuration.
    Returns list of warnings.
    """
    warnings = []

    if not settings.SUPABASE_ANON_KEY:
        warnings.append("SUPABASE_ANON_KEY (optional but recommended)")
    if settings.ON_UNKNOWN_ROLE == "allow":
        warnings.append("ON_UNKNOWN_ROLE=allow (unrecognized roles can navigate freely)")

    return warnings


def validate_permission_mapping() -> List[str]:
    """
    Check the role → panel map.
    Returns a list of problems (empty when the map is sound).
    """
    problems = []

    for role in Role:
        resources = ROLE_RESOURCES.get(role)
        if not resources:
            problems.append(f"role '{role.value}' has no resources")
            continue
        if len(set(resources)) != len(resources):
            problems.append(f"role '{role.value}' lists a resource twice")

    for resource in Resource:
        if resource not in RESOURCE_LABELS:
            problems.append(f"resource '{resource.value}' has no label")

    # Navigation and guard must agree on every path
    for role in ROLE_RESOURCES:
        sample = Session(user_id="config-check", username="config-check", role=role.value)
        nav_paths = tuple(item.path for item in build_navigation(sample))
        if nav_paths != permitted_paths(role):
            problems.append(f"navigation and guard disagree for role '{role.value}'")

    return problems


def validate_config_on_startup():
    """
    Validate configuration on application startup.
    Raises RuntimeError if critical config is missing or the permission map is broken.
    Logs warnings for optional config.
    """
    missing_required = validate_required_config()
    missing_optional = validate_optional_config()
    mapping_problems = validate_permission_mapping()

    if mapping_problems:
        error_msg = f"Invalid permission mapping: {'; '.join(mapping_problems)}"
        logger.error(error_msg)
        raise RuntimeError(error_msg)

    if missing_required:
        error_msg = f"Missing required environment variables: {', '.join(missing_required)}"
        logger.error(error_msg)
        raise RuntimeError(error_msg)

    for warning in missing_optional:
        logger.warning(f"Optional configuration missing: {warning}")

    logger.info("Configuration validation passed")
