"""
Operation mixins of the concrete Array.

Each subpackage declares one mixin in ``_base.py`` and registers its
kind-specific implementations in sibling modules.
"""
