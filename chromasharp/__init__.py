"""chromasharp: dominant-color chroma key and 3x3 sharpening demos.

Packages:
- chromasharp.image: loading, saving and validating byte images
- chromasharp.chroma: color histogram, dominant color and compositing
- chromasharp.sharpen: sharpening convolution in several pixel-access styles
- chromasharp.pipeline: interactive session and demo runners
"""
