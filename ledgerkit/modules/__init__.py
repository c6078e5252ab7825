"""
Ledgerkit Modules - Black Box Architecture

Each module is a self-contained black box with:
- Clear interface (public API)
- Hidden implementation details

Higher-level sessions use these modules only through their interfaces.
"""
