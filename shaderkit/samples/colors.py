# Reference values shared by the test-suite and the examples.

# unit RGB -> (hue degrees, saturation, value)
samples_rgb_hsv = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (120.0, 1.0, 1.0),
    (0.0, 0.0, 1.0): (240.0, 1.0, 1.0),
    (1.0, 1.0, 0.0): (60.0, 1.0, 1.0),
    (0.0, 1.0, 1.0): (180.0, 1.0, 1.0),
    (1.0, 0.0, 1.0): (300.0, 1.0, 1.0),
    (1.0, 0.5, 0.0): (30.0, 1.0, 1.0),
    (0.5, 0.25, 0.75): (270.0, 2 / 3, 0.75),
    (0.2, 0.4, 0.6): (210.0, 2 / 3, 0.6),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

samples_hsv_rgb = {hsv: rgb for rgb, hsv in samples_rgb_hsv.items()}

# hex literal -> 8-bit RGBA
samples_hex_rgba = {
    "#0380FD": (3, 128, 253, 255),
    "#406FC8": (64, 111, 200, 255),
    "#2B398F": (43, 57, 143, 255),
    "#FF77C1": (255, 119, 193, 255),
    "#fff": (255, 255, 255, 255),
    "#f008": (255, 0, 0, 136),
    "#00FF0080": (0, 255, 0, 128),
}

# CSS color name -> 8-bit RGB
samples_named_rgb = {
    "red": (255, 0, 0),
    "blue": (0, 0, 255),
    "lime": (0, 255, 0),
    "grey": (128, 128, 128),
    "orange": (255, 165, 0),
    "teal": (0, 128, 128),
    "White": (255, 255, 255),
}

FIGMA_GRADIENT = "background: linear-gradient(90deg, #0380FD 0%, #406FC8 19.05%, #2B398F 49.48%, #FF77C1 100%);"
RGBA_GRADIENT = "linear-gradient(rgba(255,0,0,1) 0%, rgba(0,0,255,1) 100%);"
