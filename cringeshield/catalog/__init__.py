"""
Static reference data: weekly challenge prompts, 30-day challenge days and
practice prompt seeds. Immutable, loaded at import time.
"""
