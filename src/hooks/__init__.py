"""Pipeline hooks preparing and compiling plugins under test."""

from src.hooks.base import HookStage, MultiParentVoter, PluginCompatTesterHook
from src.hooks.compile import CompileDecision, MultiParentCompiler
from src.hooks.factory import build_registry
from src.hooks.multi_parent_checkout import MultiParentCheckoutHook
from src.hooks.multi_parent_compile import MultiParentCompileHook
from src.hooks.registry import HookRegistry

__all__ = [
    "HookStage",
    "PluginCompatTesterHook",
    "MultiParentVoter",
    "HookRegistry",
    "MultiParentCheckoutHook",
    "MultiParentCompileHook",
    "MultiParentCompiler",
    "CompileDecision",
    "build_registry",
]
