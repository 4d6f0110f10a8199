from .parser import normalize_diff
from .prompts import PromptTemplate, build_review_prompt, load_prompt_template
from .reconciler import extract_comment_fields, reconcile_tool_call
from .engine import ReviewEngine, EngineReviewResult

__all__ = [
    "normalize_diff",
    "PromptTemplate",
    "build_review_prompt",
    "load_prompt_template",
    "extract_comment_fields",
    "reconcile_tool_call",
    "ReviewEngine",
    "EngineReviewResult",
]
