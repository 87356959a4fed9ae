import argparse
import logging
import os
import sys

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "no welcome message"   # this env var disable pygame's welcome message when imported
import pygame
from pygame.locals import (
    K_1, K_2, K_3, K_4,
    K_q, K_w, K_e, K_r,
    K_a, K_s, K_d, K_f,
    K_z, K_x, K_c, K_v,
    K_ESCAPE, KEYDOWN, KEYUP, QUIT,
)

from chip8 import Chip8, Chip8Error, MAX_ROM_SIZE, SCREEN_HEIGHT, SCREEN_WIDTH

logger = logging.getLogger(__name__)


# ******************** STATIC SECTION
# physical layout        logical keypad
#   1 2 3 4                1 2 3 C
#   Q W E R                4 5 6 D
#   A S D F                7 8 9 E
#   Z X C V                A 0 B F
KEY_MAPPINGS = {
    K_1: 0x1, K_2: 0x2, K_3: 0x3, K_4: 0xC,
    K_q: 0x4, K_w: 0x5, K_e: 0x6, K_r: 0xD,
    K_a: 0x7, K_s: 0x8, K_d: 0x9, K_f: 0xE,
    K_z: 0xA, K_x: 0x0, K_c: 0xB, K_v: 0xF,
}

def debug_enabled(value=None):
    """DEBUG env var holds an integer level, anything that is not a number counts as 0"""
    value = os.getenv('DEBUG', '0') if value is None else value
    try:
        return int(value) >= 1
    except ValueError:
        return False

DEBUG = debug_enabled()
SCALE = 15
TICKS_PER_FRAME = 5
FPS = 60    # timers run at 60Hz, one tick per rendered frame
BLUE = pygame.Color(80,69,155,255)
LIGHT_BLUE = pygame.Color(136,126,203,255)


# ******************** UTILITIES SECTION
def get_args(argv=None):
    parser = argparse.ArgumentParser(description="CHIP-8 interpreter")
    parser.add_argument("-f", "--file", required=True, help="input rom file")
    parser.add_argument("-s", "--scale", type=int, default=SCALE, help="size in pixels of a CHIP-8 pixel")
    parser.add_argument("-t", "--ticks-per-frame", type=int, default=TICKS_PER_FRAME,
                        help="instructions executed for each rendered frame")
    parser.add_argument("--fps", type=int, default=FPS, help="rendered frames (and timer ticks) per second")
    return parser.parse_args(argv)

def read_rom(path):
    """read the raw ROM bytes from the user specified path"""
    with open(path, mode='rb') as f:
        rom = f.read()
    if len(rom) > MAX_ROM_SIZE:
        raise ValueError(f"The ROM at path {path} is {len(rom)} bytes long, at most {MAX_ROM_SIZE} bytes are allowed")
    return rom


# ******************** I/O SECTION
class Screen:
    def __init__(self, w=SCREEN_WIDTH, h=SCREEN_HEIGHT, s=SCALE, bg_color=BLUE, fg_color=LIGHT_BLUE, surface=None):
        self.w, self.h, self.scale = w, h, s
        self.background = bg_color
        self.foreground = fg_color
        self.surface = surface if surface is not None else pygame.display.set_mode(
            (w * self.scale, h * self.scale),
        )
        self.surface.fill(self.background)

    def render(self, rows):
        """draw every lit cell of the framebuffer as a scaled rectangle"""
        self.surface.fill(self.background)
        for y, row in enumerate(rows):
            for x, on in enumerate(row):
                if on:
                    pygame.draw.rect(
                        self.surface,
                        self.foreground,
                        (x * self.scale, y * self.scale, self.scale, self.scale)
                    )

    @staticmethod
    def refresh():
        pygame.display.flip()

def handle_events(chip, events):
    """forward key presses/releases to the interpreter, return False when the user asked to quit"""
    for event in events:
        if event.type == QUIT:
            return False
        if event.type in (KEYDOWN, KEYUP):
            if event.key == K_ESCAPE and event.type == KEYDOWN:
                return False
            if event.key in KEY_MAPPINGS:
                chip.set_key(KEY_MAPPINGS[event.key], event.type == KEYDOWN)
    return True

def run_frame(chip, ticks_per_frame=TICKS_PER_FRAME):
    """execute the instructions of one frame, then tick the timers once"""
    for _ in range(ticks_per_frame):
        chip.step()
    return chip.tick_timers()


# ******************** ENTRY POINT SECTION
def main(argv=None):
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stdout,
    )
    args = get_args(argv)
    rom = read_rom(args.file)
    # pygame initialization
    pygame.init()
    clock = pygame.time.Clock()
    pygame.display.set_caption(os.path.basename(args.file))
    # IO
    screen = Screen(s=args.scale)
    # CPU
    chip = Chip8()
    chip.load_program(rom)
    logger.info(f"The ROM at path {args.file} has been loaded successfully")
    # emulation loop
    run = True
    try:
        while run:
            clock.tick(args.fps)
            run = handle_events(chip, pygame.event.get())
            if run:
                if run_frame(chip, args.ticks_per_frame):
                    logger.debug("sound timer expired, beep ends")
                screen.render(chip.framebuffer())
                screen.refresh()
    except Chip8Error as err:
        logger.error(err)
        sys.exit(f"********** THE EMULATOR CRASHED WITH THE FOLLOWING STATE\n{chip}")
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
