# server.py
# MCP Server & Tool Definitions (Entry Point)

import logging
import sys
from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from appo_mcp import LOG_LEVEL, TRANSPORT, docs_manager
from appo_mcp.codegen import COMPONENT_VARIANTS, STYLING_OPTIONS, generate_component, generate_hook, scaffold_feature
from appo_mcp.diagnosis import diagnose_issue as run_diagnosis
from appo_mcp.features import PERMISSION_FEATURES, PLATFORMS, SDK_FEATURES
from appo_mcp.permissions import check_permissions as run_permission_check
from appo_mcp.prompts import debug_assistant_prompt, integrate_feature_prompt, setup_wizard_prompt
from appo_mcp.setup_validator import validate_setup as run_setup_validation
from appo_mcp.version import __version__

logger = logging.getLogger(__name__)

FEATURE_LIST = ", ".join(SDK_FEATURES)
PERMISSION_FEATURE_LIST = ", ".join(PERMISSION_FEATURES)

mcp = FastMCP(
    name="appo-mcp",
    version=__version__,
    instructions=(
        "Tools, documentation and prompts for integrating the @appolabs/appo SDK "
        "into React apps running inside an Appo native WebView."
    ),
)

# ============================================================================
# MCP Tools (Protocol-Driven Interface)
# ============================================================================
# Argument names follow the published camelCase tool schema. Every tool
# returns markdown and reports bad input as text rather than raising.

@mcp.tool(
    name="generate_hook",
    description=(
        "Generate a custom React hook for an @appolabs/appo SDK feature. "
        "Returns TypeScript code with types, error handling, and loading states."
    ),
)
def generate_hook_tool(
    feature: Annotated[str, Field(description=f"The SDK feature to generate a hook for ({FEATURE_LIST})")] = "",
    hookName: Annotated[Optional[str], Field(description="Custom hook name (optional, defaults to use{Feature})")] = None,
    includeLoading: Annotated[bool, Field(description="Include loading state management (default: true)")] = True,
    includeError: Annotated[bool, Field(description="Include error state management (default: true)")] = True,
) -> str:
    return generate_hook(feature, hookName, includeLoading, includeError)


@mcp.tool(
    name="generate_component",
    description=(
        "Generate a UI component that uses @appolabs/appo SDK features. "
        "Returns a complete React component with SDK integration."
    ),
)
def generate_component_tool(
    feature: Annotated[str, Field(description=f"The SDK feature to build the component around ({FEATURE_LIST})")] = "",
    componentName: Annotated[Optional[str], Field(description="Component name (optional, defaults to {Feature}Button or similar)")] = None,
    styling: Annotated[str, Field(description=f"Styling approach: {', '.join(STYLING_OPTIONS)} (default: tailwind)")] = "tailwind",
    variant: Annotated[Optional[str], Field(description=f"Component variant/type: {', '.join(COMPONENT_VARIANTS)}")] = None,
) -> str:
    return generate_component(feature, componentName, styling, variant)


@mcp.tool(
    name="scaffold_feature",
    description=(
        "Scaffold complete feature integration including hook, component, and types. "
        "Returns multiple files with integration instructions."
    ),
)
def scaffold_feature_tool(
    feature: Annotated[str, Field(description=f"The SDK feature to scaffold ({FEATURE_LIST})")] = "",
    directory: Annotated[str, Field(description="Target directory path for file suggestions")] = "src",
    includeTests: Annotated[bool, Field(description="Include test file scaffolding (default: true)")] = True,
) -> str:
    return scaffold_feature(feature, directory, includeTests)


@mcp.tool(
    name="validate_setup",
    description=(
        "Validate @appolabs/appo SDK installation and configuration. "
        "Analyzes package.json and optionally checks import patterns."
    ),
)
def validate_setup_tool(
    packageJson: Annotated[str, Field(description="Content of package.json file to analyze")] = "",
    tsConfig: Annotated[Optional[str], Field(description="Content of tsconfig.json (optional)")] = None,
    sampleCode: Annotated[Optional[str], Field(description="Sample code to check for proper SDK usage patterns")] = None,
) -> str:
    return run_setup_validation(packageJson, tsConfig, sampleCode)


@mcp.tool(
    name="check_permissions",
    description=(
        "Analyze permission handling patterns in code for a specific SDK feature. "
        "Returns analysis with suggestions for proper permission flow."
    ),
)
def check_permissions_tool(
    code: Annotated[str, Field(description="Code to analyze for permission handling")] = "",
    feature: Annotated[str, Field(description=f"Feature requiring permission ({PERMISSION_FEATURE_LIST})")] = "",
) -> str:
    return run_permission_check(code, feature)


@mcp.tool(
    name="diagnose_issue",
    description=(
        "Diagnose common @appolabs/appo SDK integration issues. "
        "Provides diagnosis with solutions and code fixes."
    ),
)
def diagnose_issue_tool(
    symptom: Annotated[str, Field(description="Description of the issue or error")] = "",
    feature: Annotated[Optional[str], Field(description=f"SDK feature related to the issue, if known ({FEATURE_LIST})")] = None,
    errorMessage: Annotated[Optional[str], Field(description="Exact error message (if available)")] = None,
    platform: Annotated[Optional[str], Field(description=f"Platform where issue occurs ({', '.join(PLATFORMS)})")] = None,
) -> str:
    return run_diagnosis(symptom, feature, errorMessage, platform)


# ============================================================================
# MCP Resources (Documentation)
# ============================================================================

def _resource_reader(uri: str):
    def read_resource() -> str:
        return docs_manager.read_resource(uri).text
    return read_resource


def register_resources() -> None:
    """Expose every indexed document as a static resource"""
    for doc in docs_manager.list_resources():
        mcp.resource(
            doc.uri,
            name=doc.name,
            description=doc.description,
            mime_type=doc.mime_type,
        )(_resource_reader(doc.uri))
    logger.debug("Registered %d resource(s)", len(docs_manager.list_resources()))


register_resources()


# Feature-shaped URIs with no matching document fall through to these
@mcp.resource("appo://api/{feature}", name="API reference", mime_type="text/markdown")
def api_reference(feature: str) -> str:
    return docs_manager.read_resource(f"appo://api/{feature}").text


@mcp.resource("appo://examples/{feature}", name="Examples", mime_type="text/markdown")
def feature_examples(feature: str) -> str:
    return docs_manager.read_resource(f"appo://examples/{feature}").text


# Any other appo:// URI gets the manager's "Unknown resource" text
@mcp.resource("appo://{path*}", name="Documentation", mime_type="text/markdown")
def any_resource(path: str) -> str:
    return docs_manager.read_resource(f"appo://{path}").text


# ============================================================================
# MCP Prompts
# ============================================================================

@mcp.prompt(
    name="setup_wizard",
    description="Interactive setup guidance for integrating @appolabs/appo SDK into a new or existing project",
)
def setup_wizard(
    projectType: Annotated[str, Field(description="Is this a new project or existing project?")],
    framework: Annotated[Optional[str], Field(description="Frontend framework (react, next, vue, other)")] = None,
) -> str:
    return setup_wizard_prompt(projectType, framework)


@mcp.prompt(
    name="integrate_feature",
    description="Step-by-step guide for integrating a specific SDK feature",
)
def integrate_feature(
    feature: Annotated[str, Field(description=f"SDK feature to integrate ({FEATURE_LIST})")],
    requirements: Annotated[Optional[str], Field(description="Any specific requirements or constraints")] = None,
) -> str:
    return integrate_feature_prompt(feature, requirements)


@mcp.prompt(
    name="debug_assistant",
    description="Interactive troubleshooting assistant for SDK issues",
)
def debug_assistant(
    issue: Annotated[str, Field(description="Description of the issue you're experiencing")],
    logs: Annotated[Optional[str], Field(description="Any error logs or console output")] = None,
) -> str:
    return debug_assistant_prompt(issue, logs)


# ============================================================================
# Server Entry Point
# ============================================================================

def configure_logging(level: str = LOG_LEVEL) -> None:
    """Log to stderr only; stdout carries the stdio transport."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def main() -> None:
    configure_logging()
    logger.info("Starting appo-mcp %s over %s", __version__, TRANSPORT)
    if TRANSPORT == "stdio":
        mcp.run()
    else:
        mcp.run(transport=TRANSPORT)


if __name__ == "__main__":
    # Run the MCP server
    main()
