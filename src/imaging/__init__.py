"""Image helpers for preparing icon artwork.

Submodules
----------
geometry
    Sizes, rectangles and aspect-fill/center-crop arithmetic.
result
    Success/failure result type.
renderer
    Renderer protocol and the Pillow-backed implementation.
resize
    Resize, aspect-preserving resize and center-crop.
encode
    PNG encoding.
io_utils
    File I/O utilities and helpers.
"""
