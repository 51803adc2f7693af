# prompts.py
# Prompt text for setup_wizard, integrate_feature and debug_assistant

from typing import Optional

from appo_mcp.features import FEATURE_DISPLAY_NAMES, PERMISSION_FEATURES
from appo_mcp.templating import render


def setup_wizard_prompt(project_type: Optional[str], framework: Optional[str] = None) -> str:
    """Anything other than project_type="new" is treated as an existing project."""
    return render(
        "prompts/setup_wizard.md.j2",
        is_new=project_type == "new",
        framework=framework or "react",
    )


def integrate_feature_prompt(feature: Optional[str], requirements: Optional[str] = None) -> str:
    feature = feature or ""
    return render(
        "prompts/integrate_feature.md.j2",
        feature=feature,
        feature_name=FEATURE_DISPLAY_NAMES.get(feature, feature),
        requirements=requirements or "",
        requires_permission=feature in PERMISSION_FEATURES,
    )


def debug_assistant_prompt(issue: Optional[str], logs: Optional[str] = None) -> str:
    return render(
        "prompts/debug_assistant.md.j2",
        issue=issue or "",
        logs=logs or "",
    )
