# No dependencies
CHANNEL_MAX = 255
BYTES_PER_PIXEL = 4
HUE_360 = 360
