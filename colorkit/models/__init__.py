"""
Color model converters and CSS string codecs, one module per model.
"""
