import pytest

from appo_mcp.codegen import (
    build_scaffold_files,
    class_attribute,
    generate_component,
    generate_hook,
    scaffold_feature,
)
from appo_mcp.features import SDK_FEATURES

INVALID_FEATURE = (
    "Invalid feature. Available features: "
    "push, biometrics, camera, location, haptics, storage, share, network, device"
)


# ============================================================================
# generate_hook
# ============================================================================

@pytest.mark.parametrize("feature", SDK_FEATURES)
def test_every_feature_has_a_hook(feature):
    output = generate_hook(feature)
    assert output.startswith("```typescript\n")
    assert "## Usage Example" in output
    assert f"from './hooks/{feature}';" in output


def test_default_hook_name():
    output = generate_hook("push")
    assert "export function usePushNotifications(" in output
    assert "isLoading: boolean;" in output
    assert "error: Error | null;" in output


def test_custom_hook_name():
    output = generate_hook("camera", hook_name="usePhotoBooth")
    assert "export function usePhotoBooth(" in output
    assert "const hook = usePhotoBooth();" in output


def test_hook_without_loading_state():
    output = generate_hook("push", include_loading=False)
    assert "isLoading" not in output
    assert "finally" not in output
    assert "setError(null);" in output


def test_hook_without_error_state():
    output = generate_hook("push", include_error=False)
    assert "setError" not in output
    assert "setIsLoading(true);" in output


@pytest.mark.parametrize("feature", ["bluetooth", "", None, "Push"])
def test_hook_for_invalid_feature(feature):
    assert generate_hook(feature) == INVALID_FEATURE


# ============================================================================
# generate_component
# ============================================================================

@pytest.mark.parametrize("feature", SDK_FEATURES)
def test_every_feature_has_a_component(feature):
    output = generate_component(feature)
    assert output.startswith("```tsx\n")
    assert "## Usage" in output


def test_default_component_name_is_used_in_usage():
    output = generate_component("share")
    assert "export function ShareButton(" in output
    assert "return <ShareButton />;" in output


def test_custom_component_name():
    output = generate_component("camera", component_name="SelfieButton")
    assert "export function SelfieButton(" in output
    assert "import { SelfieButton } from './components/camera';" in output


def test_tailwind_styling_is_the_default():
    assert 'className="rounded-lg bg-gray-600' in generate_component("camera")


def test_css_styling_uses_semantic_classes():
    output = generate_component("push", styling="css")
    assert 'className="push-button"' in output
    assert "bg-blue-600" not in output


def test_no_styling():
    assert "className" not in generate_component("camera", styling="none")


def test_device_rows():
    tailwind = generate_component("device")
    assert '<dd className="font-medium">{device.platform}</dd>' in tailwind

    plain = generate_component("device", styling="none")
    assert "<dd>{device.isTablet ? 'Tablet' : 'Phone'}</dd>" in plain


def test_network_styling_branches():
    assert "rounded-full" in generate_component("network")
    assert "network-indicator" in generate_component("network", styling="css")
    assert "<span />" in generate_component("network", styling="none")


def test_variant_does_not_change_output():
    assert generate_component("share", variant="card") == generate_component("share")


def test_component_for_invalid_feature():
    assert generate_component("bluetooth") == INVALID_FEATURE


def test_class_attribute():
    assert class_attribute("tailwind")("p-4", "box") == ' className="p-4"'
    assert class_attribute("css")("p-4", "box") == ' className="box"'
    assert class_attribute("css")("p-4") == ""
    assert class_attribute("none")("p-4", "box") == ""


# ============================================================================
# scaffold_feature
# ============================================================================

def test_scaffold_for_permission_feature():
    output = scaffold_feature("camera")
    assert output.startswith("# Camera Feature Scaffold")
    assert "### src/types/camera.ts" in output
    assert "### src/hooks/useCamera.ts" in output
    assert "### src/components/CameraComponent.tsx" in output
    assert "### src/__tests__/useCamera.test.ts" in output
    assert "## Integration Steps" in output
    assert "import { CameraComponent } from './src/components/CameraComponent';" in output
    assert "## Permission Handling" in output
    assert "- Web: Returns 'denied' permission" in output


def test_scaffold_without_tests_in_custom_directory():
    output = scaffold_feature("haptics", directory="app", include_tests=False)
    assert "### app/hooks/useHaptics.ts" in output
    assert "__tests__" not in output
    assert "## Permission Handling" not in output
    assert "## Native vs Web Behavior" in output


def test_scaffold_for_invalid_feature():
    output = scaffold_feature("bluetooth")
    assert output.startswith("Invalid feature. Available features:\n")
    assert "- push: Push Notifications" in output
    assert len(output.splitlines()) == 1 + len(SDK_FEATURES)


def test_scaffold_files():
    files = build_scaffold_files("network", "useNetwork", "NetworkComponent", "src", include_tests=True)
    assert [f.path for f in files] == [
        "src/types/network.ts",
        "src/hooks/useNetwork.ts",
        "src/components/NetworkComponent.tsx",
        "src/__tests__/useNetwork.test.ts",
    ]
    assert "useEffect" in files[1].content
    assert files[2].language == "tsx"

    without_tests = build_scaffold_files("share", "useShare", "ShareComponent", "src", include_tests=False)
    assert len(without_tests) == 3
    assert "useEffect" not in without_tests[1].content
