# (h, s, v) with v on the 0-255 scale -> expected (r, g, b)
samples_hsv_rgb = {
    (0, 1.0, 255): (255, 0, 0),
    (60, 1.0, 255): (255, 255, 0),
    (120, 1.0, 255): (0, 255, 0),
    (180, 1.0, 255): (0, 255, 255),
    (240, 1.0, 255): (0, 0, 255),
    (300, 1.0, 255): (255, 0, 255),
    (30, 1.0, 255): (255, 127.5, 0),
    (210, 0.5, 200): (100, 150, 200),
    (330, 0.25, 128): (128, 96, 112),
}

# (r, g, b) -> expected (h, s, v)
samples_rgb_hsv = {
    (255, 0, 0): (0.0, 1.0, 255),
    (0, 255, 0): (120.0, 1.0, 255),
    (0, 0, 255): (240.0, 1.0, 255),
    (255, 255, 0): (60.0, 1.0, 255),
    (100, 150, 200): (210.0, 0.5, 200),
    (128, 96, 112): (330.0, 0.25, 128),
    (0, 0, 0): (0.0, 0.0, 0),
    (90, 90, 90): (0.0, 0.0, 90),
}

samples_hex_rgba = {
    "#FF008080": (255, 0, 128, 128),
    "ff0080": (255, 0, 128, 255),
    "#000000": (0, 0, 0, 255),
    "#ffffff00": (255, 255, 255, 0),
    "1a2B3c4D": (26, 43, 60, 77),
}

samples_bad_hex = [
    "not-a-color",
    "",
    "#",
    "#FFF",
    "#FF00",
    "#FF00800",
    "#FF0080801",
    "##FF0080",
    "#GG0000",
    " #FF0000",
]
