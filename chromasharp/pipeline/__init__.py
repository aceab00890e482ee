"""Interactive session and demo orchestration."""

from .session import ChromaKeySession, TRACKBAR_NAME
from .process import (
    compare_variants,
    run_chroma_key_demo,
    run_sharpen_demo,
)

__all__ = [
    "ChromaKeySession",
    "TRACKBAR_NAME",
    "compare_variants",
    "run_chroma_key_demo",
    "run_sharpen_demo",
]
