"""
Image Uploader Module.

Upload widget for order images: validates a picked file, encodes it as a data
URI, posts it to the backend and reports the result.

Module Structure:
    callbacks/core.py - Upload and removal callbacks
    design_ui.py - Widget construction
    pipeline.py - Upload state machine
    utils.py - Validation, encoding and server message mapping
"""
