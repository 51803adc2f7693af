from appo_mcp.prompts import debug_assistant_prompt, integrate_feature_prompt, setup_wizard_prompt


def test_setup_wizard_for_new_project():
    text = setup_wizard_prompt("new")
    assert text.startswith("# @appolabs/appo SDK Setup Wizard")
    assert "in my new react project." in text
    assert "- **Project Type:** New project" in text
    assert "- **Framework:** react" in text


def test_setup_wizard_for_existing_project():
    text = setup_wizard_prompt("existing", framework="next")
    assert "in my existing next project." in text
    assert "- **Project Type:** Existing project" in text


def test_setup_wizard_treats_unknown_project_type_as_existing():
    assert "Existing project" in setup_wizard_prompt("legacy")


def test_integrate_permission_feature():
    text = integrate_feature_prompt("camera", requirements="Must work offline")
    assert text.startswith("# Integrate Camera Capture with @appolabs/appo")
    assert "I want to add camera capture functionality" in text
    assert "## Specific Requirements\nMust work offline" in text
    assert "Use `check_permissions` tool" in text
    assert 'feature="camera"' in text
    assert "`appo://api/camera` and `appo://examples/camera`" in text


def test_integrate_feature_without_permission_or_requirements():
    text = integrate_feature_prompt("haptics")
    assert "# Integrate Haptic Feedback" in text
    assert "check_permissions" not in text
    assert "## Specific Requirements" not in text


def test_integrate_unknown_feature_uses_raw_name():
    assert integrate_feature_prompt("bluetooth").startswith("# Integrate bluetooth with")


def test_debug_assistant_with_logs():
    text = debug_assistant_prompt("App crashes on launch", logs="TypeError: x is undefined")
    assert "## Issue Description\n\nApp crashes on launch" in text
    assert "```\nTypeError: x is undefined\n```" in text
    assert "`appo://troubleshooting`" in text


def test_debug_assistant_without_logs():
    text = debug_assistant_prompt("App crashes on launch")
    assert "## Error Logs" not in text
    assert "## What I Need" in text
