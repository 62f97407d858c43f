from glabcidoc.config.config import GLOBAL_KEYWORDS, DocgenConfig, merge_keywords, parse_bool

__all__ = ["GLOBAL_KEYWORDS", "DocgenConfig", "merge_keywords", "parse_bool"]
