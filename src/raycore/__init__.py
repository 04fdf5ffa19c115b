"""A minimal ray casting renderer.

This package casts one ray per pixel from a fixed camera through a virtual
image plane and writes the resulting colors as a plain-text image:
- Generic 3D vector algebra over any numeric type
- Camera and viewport geometry mapping pixels to world-space rays
- A sequential, deterministic render loop with pluggable progress reporting

Subpackages:
    core: Vectors, rays, colors, shading, progress sinks and the render loop
    camera: Camera model with pixel to ray mapping
    preview: PPM/PNG export and Matplotlib preview
"""

__version__ = "0.1.0"
