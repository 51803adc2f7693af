# features.py
# SDK feature catalogue shared by tools, resources and prompts

from typing import Dict, Tuple

from appo_mcp.models import FeaturePermissionSpec

SDK_PACKAGE = "@appolabs/appo"

SDK_FEATURES: Tuple[str, ...] = (
    "push",
    "biometrics",
    "camera",
    "location",
    "haptics",
    "storage",
    "share",
    "network",
    "device",
)

PLATFORMS: Tuple[str, ...] = ("ios", "android", "web", "unknown")

# Features whose protected operations need an explicit grant first
PERMISSION_FEATURES: Dict[str, FeaturePermissionSpec] = {
    "push": FeaturePermissionSpec(protected_methods=["getToken"]),
    "camera": FeaturePermissionSpec(protected_methods=["takePicture"]),
    "location": FeaturePermissionSpec(protected_methods=["getCurrentPosition"]),
}

FEATURE_DESCRIPTIONS: Dict[str, str] = {
    "push": "Push Notifications - Request permission, get device token, receive notifications",
    "biometrics": "Biometric Authentication - Face ID / Touch ID authentication",
    "camera": "Camera - Request permission and capture photos",
    "location": "Location - Request permission and get GPS coordinates",
    "haptics": "Haptic Feedback - Trigger tactile feedback (impact, notifications)",
    "storage": "Persistent Storage - Key-value storage with native backing",
    "share": "Native Share Sheet - Share content using the native share dialog",
    "network": "Network Status - Monitor connectivity and network type",
    "device": "Device Info - Get platform, OS version, device details",
}

FEATURE_DISPLAY_NAMES: Dict[str, str] = {
    "push": "Push Notifications",
    "biometrics": "Biometric Authentication",
    "camera": "Camera Capture",
    "location": "Location Services",
    "haptics": "Haptic Feedback",
    "storage": "Persistent Storage",
    "share": "Native Share",
    "network": "Network Status",
    "device": "Device Information",
}

NATIVE_FALLBACKS: Dict[str, str] = {
    "push": "- Web: Returns 'denied' permission, null token",
    "biometrics": "- Web: Returns false for availability",
    "camera": "- Web: Returns 'denied' permission",
    "location": "- Web: Returns 'denied' permission (consider using browser Geolocation API)",
    "haptics": "- Web: Silent no-op (no vibration API used)",
    "storage": "- Web: Falls back to localStorage",
    "share": "- Web: Uses navigator.share() if available, otherwise fails gracefully",
    "network": "- Web: Uses navigator.onLine and online/offline events",
    "device": "- Web: Parses user agent for basic device info",
}


def capitalize(feature: str) -> str:
    """push -> Push (only the first letter changes)"""
    return feature[:1].upper() + feature[1:]


def is_sdk_feature(feature) -> bool:
    return isinstance(feature, str) and feature in SDK_FEATURES


def is_permission_feature(feature) -> bool:
    return isinstance(feature, str) and feature in PERMISSION_FEATURES
