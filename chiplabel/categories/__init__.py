"""
Category catalog sub-package for chiplabel.

Contains YAML files that bind each component category to the ordered list
of label families tried for it. The loader module (category_registry.py
in the parent package) reads these files at runtime.
"""
