"""Screen, world and key constants shared by the game modules."""

WIDTH = 1280
HEIGHT = 720

TILE_SIZE = 64

PI = 3.14159265
TWO_PI = 6.28318530

NUM_RAYS = WIDTH

XK_W = 0x0077
XK_A = 0x0061
XK_S = 0x0073
XK_D = 0x0064
XK_LEFT = 0xFF51
XK_RIGHT = 0xFF53

KEYPRESS = 2
KEYRELEASE = 3