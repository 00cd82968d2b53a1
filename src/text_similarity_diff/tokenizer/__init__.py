"""Tokenizer subpackage.

Re-exports the default tokenizer:
- RegexTokenizer: abbreviation-aware sentence splitter and ASCII word splitter
"""

from text_similarity_diff.tokenizer.regex import ABBREVIATIONS, RegexTokenizer

__all__ = ["ABBREVIATIONS", "RegexTokenizer"]
