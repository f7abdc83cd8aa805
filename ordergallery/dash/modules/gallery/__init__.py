"""
Gallery Module.

Paginated grid of order images with deletion and a full-screen lightbox.

Module Structure:
    callbacks/core.py - Page loading, pagination, lightbox and delete callbacks
    design_ui.py - Grid, pagination, modals
    queries.py - Cached page fetch and confirmed delete
    state.py - Pagination and lightbox navigation rules
    utils.py - Thumbnail and message builders
"""
