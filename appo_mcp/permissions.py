# permissions.py
# Permission pattern analysis for check_permissions

import logging
from typing import List, Optional

from appo_mcp.features import PERMISSION_FEATURES, capitalize, is_permission_feature
from appo_mcp.models import PermissionAnalysis
from appo_mcp.templating import render

logger = logging.getLogger(__name__)

PERMISSION_REQUEST_MARKER = "requestPermission"

STATUS_MARKERS = ("permission", "status", "'granted'", '"granted"')
DENIED_MARKERS = ("'denied'", '"denied"')
# "null" matches any null comparison, not only the undetermined state
UNDETERMINED_MARKERS = ("'undetermined'", '"undetermined"', "null")
EXPLANATION_MARKERS = (
    "modal",
    "Modal",
    "dialog",
    "Dialog",
    "alert",
    "confirm",
    "explanation",
    "why",
    "permission needed",
)

MISSING_ARGUMENTS_MESSAGE = "Please provide both `code` and `feature` (push, camera, or location) parameters."


def _contains_any(code: str, markers) -> bool:
    return any(marker in code for marker in markers)


def analyze_permission_patterns(code: str, feature: str) -> PermissionAnalysis:
    """
    Run the fixed set of permission checks over a code snippet.

    Every check is a plain substring test on the whole snippet; nothing is
    parsed. A protected call is only reported when no permission request
    appears anywhere in the text, whatever its position.
    """
    spec = PERMISSION_FEATURES[feature]

    analysis = PermissionAnalysis(
        has_permission_request=PERMISSION_REQUEST_MARKER in code,
        has_status_check=_contains_any(code, STATUS_MARKERS),
        has_denied_handling=_contains_any(code, DENIED_MARKERS),
        has_undetermined_handling=_contains_any(code, UNDETERMINED_MARKERS),
        has_error_handling="try" in code and "catch" in code,
        has_user_explanation=_contains_any(code, EXPLANATION_MARKERS),
    )

    # Issues
    for method in spec.protected_methods:
        if f".{method}(" in code and PERMISSION_REQUEST_MARKER not in code:
            analysis.issues.append(
                f"Protected method `{method}` is used without requesting permission first."
            )

    if not analysis.has_permission_request:
        analysis.issues.append(f"No `requestPermission()` call found for {feature}.")

    if not analysis.has_denied_handling:
        analysis.issues.append(
            "No handling for 'denied' permission status. Users who deny permission won't see helpful feedback."
        )

    # Suggestions
    if not analysis.has_user_explanation:
        analysis.suggestions.append(
            "Consider explaining to users WHY you need this permission before requesting it. "
            "This improves acceptance rates."
        )

    if not analysis.has_error_handling:
        analysis.suggestions.append(
            "Add try/catch blocks to handle potential errors during permission requests."
        )

    if not analysis.has_undetermined_handling:
        analysis.suggestions.append(
            "Handle the 'undetermined' state - this is the initial state before the user makes a choice."
        )

    return analysis


def get_recommended_pattern(feature: str) -> str:
    return render(f"permissions/{feature}.tsx")


def _checkbox(checked: bool, label: str) -> str:
    return f"- [{'x' if checked else ' '}] {label}"


def build_analysis_output(feature: str, analysis: PermissionAnalysis) -> str:
    sections: List[str] = [f"## {capitalize(feature)} Permission Analysis\n"]

    sections.append("### Permission Flow Checklist\n")
    sections.append(_checkbox(analysis.has_permission_request, "Calls `requestPermission()`"))
    sections.append(_checkbox(analysis.has_status_check, "Checks permission status"))
    sections.append(_checkbox(analysis.has_denied_handling, "Handles 'denied' status"))
    sections.append(_checkbox(analysis.has_undetermined_handling, "Handles initial/undetermined state"))
    sections.append(_checkbox(analysis.has_error_handling, "Has error handling"))
    sections.append(_checkbox(analysis.has_user_explanation, "Explains why permission is needed"))
    sections.append("")

    if analysis.issues:
        sections.append("### Issues Found\n")
        sections.extend(f"- ❌ {issue}" for issue in analysis.issues)
        sections.append("")

    if analysis.suggestions:
        sections.append("### Suggestions\n")
        sections.extend(f"- 💡 {suggestion}" for suggestion in analysis.suggestions)
        sections.append("")

    sections.append("### Recommended Pattern\n")
    sections.append("```tsx")
    sections.append(get_recommended_pattern(feature))
    sections.append("```")

    return "\n".join(sections)


def check_permissions(code: Optional[str], feature: Optional[str]) -> str:
    """Analyze permission handling in a snippet and render a checklist report."""
    if not code or not feature:
        return MISSING_ARGUMENTS_MESSAGE

    if not is_permission_feature(feature):
        return f"Invalid feature. Permission-required features are: {', '.join(PERMISSION_FEATURES)}"

    analysis = analyze_permission_patterns(code, feature)
    logger.debug(
        "check_permissions(%s): %d issue(s), %d suggestion(s)",
        feature, len(analysis.issues), len(analysis.suggestions),
    )
    return build_analysis_output(feature, analysis)
