# diagnosis.py
# Known-issue matching for diagnose_issue

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

from appo_mcp.models import KnownIssue

logger = logging.getLogger(__name__)

KNOWN_ISSUES_FILE = Path(__file__).parent / "data" / "known_issues.yaml"

MAX_REPORTED_ISSUES = 3

MISSING_SYMPTOM_MESSAGE = "Please describe the issue you're experiencing in the `symptom` parameter."

GENERAL_TROUBLESHOOTING_STEPS = (
    "1. **Check native context:** Verify `appo.isNative` is true",
    "2. **Check permissions:** Ensure required permissions are granted",
    "3. **Check installation:** Verify `@appolabs/appo` is properly installed",
    "4. **Check console:** Look for errors in the console/logs",
    "5. **Test on device:** Some features only work on physical devices",
)

DEBUG_SNIPPET = """import { getAppo } from '@appolabs/appo';

function debugSdk() {
  const appo = getAppo();
  console.log('SDK Version:', appo.version);
  console.log('Is Native:', appo.isNative);
  appo.device.getInfo().then(info => {
    console.log('Device:', info);
  });
}"""


def load_known_issues(path: Path = KNOWN_ISSUES_FILE) -> Tuple[KnownIssue, ...]:
    """
    Parse the known-issue catalogue. Order is preserved: it decides which
    three entries are shown when more match.
    """
    entries = yaml.safe_load(path.read_text(encoding='utf-8')) or []
    return tuple(KnownIssue(**entry) for entry in entries)


KNOWN_ISSUES: Tuple[KnownIssue, ...] = load_known_issues()


def match_issues(
    symptom: str,
    feature: Optional[str] = None,
    catalogue: Tuple[KnownIssue, ...] = KNOWN_ISSUES,
) -> List[KnownIssue]:
    """
    Return the catalogue entries relevant to a symptom, in catalogue order.

    An entry matches when any of its keywords is a substring of the
    lowercased symptom. A feature hint narrows the matches to entries that
    mention the feature in their title or keywords, unless that would leave
    nothing, in which case the keyword matches are kept as they are.
    """
    search_terms = symptom.lower()
    matched = [
        issue for issue in catalogue
        if any(keyword.lower() in search_terms for keyword in issue.symptoms)
    ]

    if not feature:
        return matched

    narrowed = [
        issue for issue in matched
        if feature in issue.title.lower() or any(feature in keyword for keyword in issue.symptoms)
    ]
    return narrowed if narrowed else matched


def diagnose_issue(
    symptom: Optional[str],
    feature: Optional[str] = None,
    error_message: Optional[str] = None,
    platform: Optional[str] = None,
) -> str:
    """Match a symptom against known issues and render a troubleshooting report."""
    if not symptom:
        return MISSING_SYMPTOM_MESSAGE

    relevant = match_issues(symptom, feature)
    logger.debug("diagnose_issue matched %d known issue(s) for %r", len(relevant), symptom)

    if not relevant:
        return build_generic_diagnosis(symptom, feature, error_message, platform)

    return build_diagnosis_output(relevant, platform)


def build_diagnosis_output(issues: List[KnownIssue], platform: Optional[str] = None) -> str:
    sections: List[str] = ["## Diagnosis Results\n"]

    if platform:
        sections.append(f"Platform: **{platform}**\n")

    for issue in issues[:MAX_REPORTED_ISSUES]:
        sections.append(f"### {issue.title}\n")

        sections.append("**Possible Causes:**")
        sections.extend(f"- {cause}" for cause in issue.causes)
        sections.append("")

        sections.append("**Solutions:**")
        sections.extend(f"- {solution}" for solution in issue.solutions)
        sections.append("")

        if issue.code_example:
            sections.append("**Example Fix:**")
            sections.append("```tsx")
            sections.append(issue.code_example)
            sections.append("```")
            sections.append("")

    sections.append("---")
    sections.append(
        "\nIf none of these solutions work, please provide more details about your setup "
        "(package versions, platform, full error message)."
    )

    return "\n".join(sections)


def build_generic_diagnosis(
    symptom: str,
    feature: Optional[str] = None,
    error_message: Optional[str] = None,
    platform: Optional[str] = None,
) -> str:
    """Fallback report used when no known issue matches."""
    sections: List[str] = ["## Diagnosis\n", f"**Symptom:** {symptom}\n"]

    if feature:
        sections.append(f"**Feature:** {feature}")
    if error_message:
        sections.append(f"**Error:** {error_message}")
    if platform:
        sections.append(f"**Platform:** {platform}")
    sections.append("")

    sections.append("### General Troubleshooting Steps\n")
    sections.extend(GENERAL_TROUBLESHOOTING_STEPS)
    sections.append("")

    sections.append("### Debug Code\n")
    sections.append("```tsx")
    sections.append(DEBUG_SNIPPET)
    sections.append("```")
    sections.append("")

    sections.append("Please provide more details (error messages, code snippets) for a more specific diagnosis.")

    return "\n".join(sections)
