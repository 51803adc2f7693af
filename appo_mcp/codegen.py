# codegen.py
# React hook, component and feature scaffold generation

import logging
from typing import Callable, Dict, List, Optional

from appo_mcp.features import (
    FEATURE_DESCRIPTIONS,
    NATIVE_FALLBACKS,
    PERMISSION_FEATURES,
    SDK_FEATURES,
    capitalize,
    is_sdk_feature,
)
from appo_mcp.models import ScaffoldFile
from appo_mcp.templating import render

logger = logging.getLogger(__name__)

STYLING_OPTIONS = ("tailwind", "css", "none")
COMPONENT_VARIANTS = ("button", "card", "form", "status")

DEFAULT_HOOK_NAMES: Dict[str, str] = {
    "push": "usePushNotifications",
    "biometrics": "useBiometrics",
    "camera": "useCamera",
    "location": "useLocation",
    "haptics": "useHaptics",
    "storage": "useStorage",
    "share": "useShare",
    "network": "useNetwork",
    "device": "useDevice",
}

DEFAULT_COMPONENT_NAMES: Dict[str, str] = {
    "push": "PushNotificationButton",
    "biometrics": "BiometricAuthButton",
    "camera": "CameraCapture",
    "location": "LocationButton",
    "haptics": "HapticButtons",
    "storage": "StorageDemo",
    "share": "ShareButton",
    "network": "NetworkStatus",
    "device": "DeviceInfo",
}


def invalid_feature_message() -> str:
    return f"Invalid feature. Available features: {', '.join(SDK_FEATURES)}"


# ============================================================================
# Hooks
# ============================================================================

def generate_hook(
    feature: Optional[str],
    hook_name: Optional[str] = None,
    include_loading: bool = True,
    include_error: bool = True,
) -> str:
    """
    Generate a typed React hook wrapping one SDK feature, followed by a usage example.

    haptics and network hooks carry no loading/error state, so the two
    flags have no effect on them.
    """
    if not is_sdk_feature(feature):
        return invalid_feature_message()

    hook_name = hook_name or DEFAULT_HOOK_NAMES[feature]
    code = render(
        f"hooks/{feature}.ts.j2",
        hook_name=hook_name,
        include_loading=include_loading,
        include_error=include_error,
    )

    return "\n".join([
        "```typescript",
        code,
        "```",
        "",
        "## Usage Example",
        "",
        "```tsx",
        f"import {{ {hook_name} }} from './hooks/{feature}';",
        "",
        "function MyComponent() {",
        f"  const hook = {hook_name}();",
        "",
        "  // Use the hook methods and state",
        "  return <div>...</div>;",
        "}",
        "```",
    ])


# ============================================================================
# Components
# ============================================================================

def class_attribute(styling: str) -> Callable[..., str]:
    """
    Build the cls() helper used by component templates.

    cls(tailwind_classes, css_class) renders a leading-space className
    attribute for the selected styling, or nothing for styling="none".
    """
    def cls(tailwind_classes: str, css_class: Optional[str] = None) -> str:
        if styling == "tailwind":
            return f' className="{tailwind_classes}"'
        if styling == "css" and css_class:
            return f' className="{css_class}"'
        return ""

    return cls


def generate_component(
    feature: Optional[str],
    component_name: Optional[str] = None,
    styling: Optional[str] = "tailwind",
    variant: Optional[str] = None,
) -> str:
    """Generate a React component built around one SDK feature, followed by usage."""
    if not is_sdk_feature(feature):
        return invalid_feature_message()

    styling = styling or "tailwind"
    component_name = component_name or DEFAULT_COMPONENT_NAMES[feature]
    logger.debug("generate_component(%s, styling=%s, variant=%s)", feature, styling, variant)

    code = render(
        f"components/{feature}.tsx.j2",
        component_name=component_name,
        styling=styling,
        cls=class_attribute(styling),
    )

    return "\n".join([
        "```tsx",
        code,
        "```",
        "",
        "## Usage",
        "",
        "```tsx",
        f"import {{ {component_name} }} from './components/{feature}';",
        "",
        "function App() {",
        f"  return <{component_name} />;",
        "}",
        "```",
    ])


# ============================================================================
# Scaffolds
# ============================================================================

def build_scaffold_files(
    feature: str,
    hook_name: str,
    component_name: str,
    directory: str,
    include_tests: bool,
) -> List[ScaffoldFile]:
    capitalized = capitalize(feature)
    files = [
        ScaffoldFile(
            path=f"{directory}/types/{feature}.ts",
            language="typescript",
            content=render(f"scaffold/types/{feature}.ts"),
        ),
        ScaffoldFile(
            path=f"{directory}/hooks/{hook_name}.ts",
            language="typescript",
            content=render("scaffold/hook.ts.j2", feature=feature, capitalized=capitalized, hook_name=hook_name),
        ),
        ScaffoldFile(
            path=f"{directory}/components/{component_name}.tsx",
            language="tsx",
            content=render(
                "scaffold/component.tsx.j2",
                feature=feature,
                hook_name=hook_name,
                component_name=component_name,
            ),
        ),
    ]

    if include_tests:
        files.append(ScaffoldFile(
            path=f"{directory}/__tests__/{hook_name}.test.ts",
            language="typescript",
            content=render("scaffold/hook.test.ts.j2", feature=feature, hook_name=hook_name),
        ))

    return files


def scaffold_feature(
    feature: Optional[str],
    directory: Optional[str] = "src",
    include_tests: bool = True,
) -> str:
    """Lay out types, hook, component and test files for a feature, with integration steps."""
    if not is_sdk_feature(feature):
        listing = "\n".join(f"- {key}: {desc}" for key, desc in FEATURE_DESCRIPTIONS.items())
        return f"Invalid feature. Available features:\n{listing}"

    directory = directory or "src"
    capitalized = capitalize(feature)
    hook_name = f"use{capitalized}"
    component_name = f"{capitalized}Component"

    files = build_scaffold_files(feature, hook_name, component_name, directory, include_tests)

    return render(
        "scaffold/scaffold.md.j2",
        capitalized=capitalized,
        description=FEATURE_DESCRIPTIONS[feature],
        files=files,
        component_name=component_name,
        directory=directory,
        requires_permission=feature in PERMISSION_FEATURES,
        fallback=NATIVE_FALLBACKS[feature],
    )
