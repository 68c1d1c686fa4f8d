"""Accessibility and interaction-compliance engine for the FoodyLog UI."""

from .announcer import (
    AnnouncementMessage,
    Announcer,
    InMemoryLiveRegion,
    InMemoryLiveRegionHost,
    LiveRegion,
    LiveRegionHost,
    Priority,
)
from .aria import create_aria_label, generate_aria_id, navigation_item_attributes
from .config import DEFAULT_CONFIG, A11yConfig, config_from_mapping, load_config
from .contrast import (
    ContrastResult,
    audit_palette,
    contrast_matrix,
    contrast_ratio,
    hsl_string_to_hex,
    meets_wcag,
    parse_hex_color,
    relative_luminance,
    validate_contrast,
)
from .controls.interaction import KeyPress, PointerPress, parse_key_event, parse_pointer_event
from .focus import (
    ElementListBoundary,
    FocusableElement,
    FocusBoundary,
    FocusHost,
    FocusManager,
    FocusOptions,
    is_focusable,
)
from .geometry import (
    BoundingBox,
    TouchTargetMonitor,
    TouchTargetResult,
    meets_target_spacing,
    validate_touch_target,
)
from .navigation import NavigationTopology, next_index
from .orchestrator import (
    HapticsDriver,
    HapticsUnavailableError,
    InteractionOrchestrator,
    RippleRenderer,
    RippleSpec,
)
from .preferences import EnvironmentPreferences, StaticPreferences, animation_duration
from .scheduling import ManualScheduler, ScheduledTask, Scheduler, ThreadingScheduler
from .style.focus_ring import FocusRingStyle, build_focus_ring_style

__all__ = [
    "A11yConfig",
    "AnnouncementMessage",
    "Announcer",
    "BoundingBox",
    "ContrastResult",
    "DEFAULT_CONFIG",
    "ElementListBoundary",
    "EnvironmentPreferences",
    "FocusBoundary",
    "FocusHost",
    "FocusManager",
    "FocusOptions",
    "FocusRingStyle",
    "FocusableElement",
    "HapticsDriver",
    "HapticsUnavailableError",
    "InMemoryLiveRegion",
    "InMemoryLiveRegionHost",
    "InteractionOrchestrator",
    "KeyPress",
    "LiveRegion",
    "LiveRegionHost",
    "ManualScheduler",
    "NavigationTopology",
    "PointerPress",
    "Priority",
    "RippleRenderer",
    "RippleSpec",
    "ScheduledTask",
    "Scheduler",
    "StaticPreferences",
    "ThreadingScheduler",
    "TouchTargetMonitor",
    "TouchTargetResult",
    "animation_duration",
    "audit_palette",
    "build_focus_ring_style",
    "config_from_mapping",
    "contrast_matrix",
    "contrast_ratio",
    "create_aria_label",
    "generate_aria_id",
    "hsl_string_to_hex",
    "is_focusable",
    "load_config",
    "meets_target_spacing",
    "meets_wcag",
    "navigation_item_attributes",
    "next_index",
    "parse_hex_color",
    "parse_key_event",
    "parse_pointer_event",
    "relative_luminance",
    "validate_contrast",
    "validate_touch_target",
]
