"""
FitFlash fitness tracking: weight units, workout formatting and page helpers.
"""
