# setup_validator.py
# Installation and configuration checks for validate_setup

import json
import logging
import re
from typing import Any, Dict, List, Optional

from appo_mcp.features import SDK_PACKAGE
from appo_mcp.models import SetupValidationResult

logger = logging.getLogger(__name__)

INVALID_PACKAGE_JSON_MESSAGE = "**Error:** Invalid package.json - could not parse JSON"

SUPPORTED_MODULE_RESOLUTIONS = ("node", "node16", "nodenext", "bundler")

# SDK methods that return a Promise
ASYNC_METHODS = (
    "requestPermission",
    "getToken",
    "authenticate",
    "takePicture",
    "getCurrentPosition",
    "getStatus",
    "getInfo",
)

PROTECTED_CALLS = ("push.getToken", "camera.takePicture", "location.getCurrentPosition")

QUICK_START_SNIPPET = """import { getAppo } from '@appolabs/appo';

function MyComponent() {
  const appo = getAppo();

  // Check if running in native app
  if (appo.isNative) {
    // Use native features
  }
}"""


def _parse_json_object(text: Any) -> Dict[str, Any]:
    """Parse a JSON document, treating non-object documents as {}. Raises ValueError for non-JSON input."""
    try:
        parsed = json.loads(text)
    except TypeError as e:
        raise ValueError(str(e)) from e
    return parsed if isinstance(parsed, dict) else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _major_version(version: str) -> Optional[int]:
    """Leading major number of a semver range like ^18.2.0 or ~16.8; None when there is none."""
    match = re.match(r"\s*(\d+)", re.sub(r"[\^~]", "", version, count=1))
    return int(match.group(1)) if match else None


def validate_dependencies(pkg: Dict[str, Any], result: SetupValidationResult) -> None:
    all_deps = {**_as_dict(pkg.get("dependencies")), **_as_dict(pkg.get("devDependencies"))}

    sdk_version = all_deps.get(SDK_PACKAGE)
    if not sdk_version:
        result.is_valid = False
        result.errors.append(
            f"{SDK_PACKAGE} is not installed. Run: `npm install {SDK_PACKAGE}` or `pnpm add {SDK_PACKAGE}`"
        )
    else:
        sdk_version = str(sdk_version)
        if sdk_version.startswith("^0.") or sdk_version.startswith("0."):
            result.warnings.append(
                f"You're using version {sdk_version} which may be a pre-release. Consider upgrading to stable v1.x."
            )

    react_version = all_deps.get("react")
    if not react_version:
        result.warnings.append(
            "React is not listed as a dependency. The SDK hooks require React 16.8+."
        )
    else:
        react_version = str(react_version)
        major = _major_version(react_version)
        if major is not None and major < 16:
            result.errors.append(
                f"React {react_version} is too old. The SDK requires React 16.8+ for hooks support."
            )
            result.is_valid = False

    if not all_deps.get("typescript"):
        result.suggestions.append(
            "Consider adding TypeScript for better type safety. The SDK provides full TypeScript definitions."
        )


def validate_ts_config(ts_config: str, result: SetupValidationResult) -> None:
    try:
        ts = _parse_json_object(ts_config)
    except ValueError:
        logger.debug("tsconfig.json could not be parsed")
        result.warnings.append("Could not parse tsconfig.json")
        return

    compiler_options = _as_dict(ts.get("compilerOptions"))

    module_resolution = compiler_options.get("moduleResolution")
    if module_resolution and str(module_resolution).lower() not in SUPPORTED_MODULE_RESOLUTIONS:
        result.warnings.append(
            f'moduleResolution is set to "{module_resolution}". '
            'Consider using "bundler" or "node16" for better ESM support.'
        )

    if not compiler_options.get("strict"):
        result.suggestions.append(
            "Enable strict mode in tsconfig.json for better type checking with the SDK."
        )

    if not compiler_options.get("esModuleInterop"):
        result.warnings.append(
            "Enable esModuleInterop in tsconfig.json for proper module imports."
        )


def validate_code_patterns(code: str, result: SetupValidationResult) -> None:
    """Substring checks for common SDK usage mistakes in a sample snippet."""
    if SDK_PACKAGE in code:
        if "getAppo" not in code and f"from '{SDK_PACKAGE}'" not in code:
            result.warnings.append(
                f"Make sure to import `getAppo` from '{SDK_PACKAGE}' to access the SDK instance."
            )

    if "window.appo" in code:
        result.warnings.append(
            "Avoid accessing `window.appo` directly. Use `getAppo()` from the SDK for type safety "
            "and proper initialization."
        )

    if "await" not in code and ".then(" not in code:
        for method in ASYNC_METHODS:
            if f".{method}(" in code:
                result.warnings.append(
                    f"The method `{method}` returns a Promise. Make sure to use `await` or `.then()`."
                )
                break

    if any(call in code for call in PROTECTED_CALLS) and "requestPermission" not in code:
        result.suggestions.append(
            "Consider requesting permission before accessing protected features (push token, camera, location)."
        )

    if "getAppo()" in code and "try" not in code and "catch" not in code:
        result.suggestions.append(
            "Consider adding try/catch blocks around SDK calls to handle potential errors gracefully."
        )

    if "useEffect" in code and "onMessage" in code and "return" not in code:
        result.warnings.append(
            "When using `appo.push.onMessage()` in useEffect, make sure to return the unsubscribe function for cleanup."
        )


def build_validation_output(result: SetupValidationResult) -> str:
    sections: List[str] = []

    if result.is_valid and not result.errors:
        sections.append("## ✅ Setup Validation Passed\n")
    else:
        sections.append("## ❌ Setup Validation Failed\n")

    if result.errors:
        sections.append("### Errors\n")
        sections.extend(f"- ❌ {error}" for error in result.errors)
        sections.append("")

    if result.warnings:
        sections.append("### Warnings\n")
        sections.extend(f"- ⚠️ {warning}" for warning in result.warnings)
        sections.append("")

    if result.suggestions:
        sections.append("### Suggestions\n")
        sections.extend(f"- 💡 {suggestion}" for suggestion in result.suggestions)
        sections.append("")

    if not result.errors and not result.warnings and not result.suggestions:
        sections.append(
            f"Your {SDK_PACKAGE} setup looks good! The SDK is properly installed and configured."
        )

    sections.append("\n### Quick Start\n")
    sections.append("```tsx")
    sections.append(QUICK_START_SNIPPET)
    sections.append("```")

    return "\n".join(sections)


def validate_setup(
    package_json: Optional[str],
    ts_config: Optional[str] = None,
    sample_code: Optional[str] = None,
) -> str:
    """Check package.json (and optionally tsconfig.json and sample code) for SDK setup problems."""
    try:
        pkg = _parse_json_object(package_json)
    except ValueError:
        return INVALID_PACKAGE_JSON_MESSAGE

    result = SetupValidationResult()
    validate_dependencies(pkg, result)

    if ts_config:
        validate_ts_config(ts_config, result)

    if sample_code:
        validate_code_patterns(sample_code, result)

    logger.debug(
        "validate_setup: %d error(s), %d warning(s), %d suggestion(s)",
        len(result.errors), len(result.warnings), len(result.suggestions),
    )
    return build_validation_output(result)
