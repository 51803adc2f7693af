# models.py
# Pydantic models (Data schemas)

from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional

# ============================================================================
# Diagnosis Catalogue
# ============================================================================

class KnownIssue(BaseModel):
    """A known-issue record consulted by diagnose_issue"""
    title: str = Field(description="Short human-readable label")
    symptoms: List[str] = Field(min_length=1, description="Lowercase substrings that mark a candidate match")
    causes: List[str] = Field(min_length=1, description="Explanations, in display order")
    solutions: List[str] = Field(min_length=1, description="Remediation steps, in display order")
    code_example: Optional[str] = Field(None, description="Illustrative code, rendered verbatim")

    model_config = ConfigDict(frozen=True, json_schema_extra = {
            "example": {
                "title": "Push token is null",
                "symptoms": ["token null", "token is null"],
                "causes": ["Permission not granted before requesting token"],
                "solutions": ["Always request permission before getting token"],
                "code_example": "const token = await appo.push.getToken();"
            }
        })


# ============================================================================
# Permission Analysis
# ============================================================================

class FeaturePermissionSpec(BaseModel):
    """Operations of a feature that need a prior permission grant"""
    protected_methods: List[str] = Field(description="Operations that must not run before permission is granted")

    model_config = ConfigDict(frozen=True)


class PermissionAnalysis(BaseModel):
    """Outcome of one pass of permission pattern checks over a code snippet"""
    has_permission_request: bool = False
    has_status_check: bool = False
    has_denied_handling: bool = False
    has_undetermined_handling: bool = False
    has_error_handling: bool = False
    has_user_explanation: bool = False
    issues: List[str] = Field(default_factory=list, description="Problems found, in check order")
    suggestions: List[str] = Field(default_factory=list, description="Improvements, in check order")


# ============================================================================
# Setup Validation
# ============================================================================

class SetupValidationResult(BaseModel):
    """Result accumulated by validate_setup"""
    is_valid: bool = True
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)


# ============================================================================
# Code Generation
# ============================================================================

class ScaffoldFile(BaseModel):
    """One file proposed by scaffold_feature"""
    path: str = Field(description="Suggested path relative to the project root")
    language: str = Field(description="Fence language for the markdown code block")
    content: str


# ============================================================================
# Documentation Resources
# ============================================================================

class DocMetadata(BaseModel):
    """Lightweight resource metadata - returned when listing resources"""
    uri: str = Field(description="Resource URI, e.g. appo://api/push")
    name: str = Field(description="Display name")
    description: str = Field(description="What this document covers")
    mime_type: str = Field("text/markdown", description="Content type of the document")

    model_config = ConfigDict(json_schema_extra = {
            "example": {
                "uri": "appo://api/push",
                "name": "API: push",
                "description": "API reference for appo.push",
                "mime_type": "text/markdown"
            }
        })


class DocReadResult(BaseModel):
    """Result returned by DocsManager.read_resource"""
    status: str = Field(description="Status: 'ok' or 'error'")
    uri: str
    mime_type: str = "text/markdown"
    text: str = Field(description="Document body, or a human-readable error message")
