import os
import tempfile
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")   # no window needed to exercise the front end helpers
import pygame

from chip8 import Chip8, MAX_ROM_SIZE
from chip8_gui import KEY_MAPPINGS, Screen, debug_enabled, get_args, handle_events, read_rom, run_frame


class TestKeyMappings(unittest.TestCase):
    def test_layout(self):
        self.assertEqual(KEY_MAPPINGS[pygame.K_1], 0x1)
        self.assertEqual(KEY_MAPPINGS[pygame.K_4], 0xC)
        self.assertEqual(KEY_MAPPINGS[pygame.K_x], 0x0)
        self.assertEqual(KEY_MAPPINGS[pygame.K_v], 0xF)
        self.assertEqual(sorted(KEY_MAPPINGS.values()), list(range(16)))


class TestEvents(unittest.TestCase):
    def test_press_and_release(self):
        chip = Chip8()
        down = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q)
        self.assertTrue(handle_events(chip, [down]))
        self.assertTrue(chip.keypad[0x4])
        up = pygame.event.Event(pygame.KEYUP, key=pygame.K_q)
        self.assertTrue(handle_events(chip, [up]))
        self.assertFalse(chip.keypad[0x4])

    def test_unmapped_key_ignored(self):
        chip = Chip8()
        self.assertTrue(handle_events(chip, [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p)]))
        self.assertTrue(chip.keypad.untouched())

    def test_quit(self):
        chip = Chip8()
        self.assertFalse(handle_events(chip, [pygame.event.Event(pygame.QUIT)]))
        self.assertFalse(handle_events(chip, [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)]))


class TestFrame(unittest.TestCase):
    def test_run_frame(self):
        chip = Chip8()
        # V0 = 1, ST = V0, then spin on a jump to self
        chip.load_program(bytes([0x60, 0x01, 0xF0, 0x18, 0x12, 0x04]))
        self.assertTrue(run_frame(chip, 5))
        self.assertEqual(chip.pc, 0x204)
        self.assertFalse(run_frame(chip, 5))


class TestScreen(unittest.TestCase):
    def test_render_scales_lit_cells(self):
        surface = pygame.Surface((64 * 2, 32 * 2))
        screen = Screen(s=2, surface=surface)
        chip = Chip8()
        chip.screen.write_pixel(3, 1, True)
        screen.render(chip.framebuffer())
        self.assertEqual(surface.get_at((6, 2)), screen.foreground)
        self.assertEqual(surface.get_at((7, 3)), screen.foreground)
        self.assertEqual(surface.get_at((8, 2)), screen.background)
        self.assertEqual(surface.get_at((0, 0)), screen.background)


class TestRom(unittest.TestCase):
    def _write(self, data):
        fd, path = tempfile.mkstemp(suffix=".ch8")
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        self.addCleanup(os.remove, path)
        return path

    def test_read_rom(self):
        path = self._write(bytes([0x00, 0xE0, 0x12, 0x00]))
        self.assertEqual(read_rom(path), b"\x00\xe0\x12\x00")

    def test_read_oversized_rom(self):
        path = self._write(bytes(MAX_ROM_SIZE + 1))
        with self.assertRaises(ValueError):
            read_rom(path)

    def test_args(self):
        args = get_args(["-f", "pong.ch8", "--scale", "10"])
        self.assertEqual(args.file, "pong.ch8")
        self.assertEqual(args.scale, 10)
        self.assertEqual(args.ticks_per_frame, 5)
        self.assertEqual(args.fps, 60)

    def test_debug_env_value(self):
        self.assertTrue(debug_enabled("1"))
        self.assertTrue(debug_enabled("2"))
        self.assertFalse(debug_enabled("0"))
        self.assertFalse(debug_enabled("yes"))
        self.assertFalse(debug_enabled(""))


if __name__ == "__main__":
    unittest.main()
