# CHIP-8 INFO
# https://chip-8.github.io/extensions/#chip-8
# http://devernay.free.fr/hacks/chip8/C8TECH10.HTM
#
# TEST SUITE
# https://github.com/Timendus/chip8-test-suite


import logging
import random
from functools import wraps

logger = logging.getLogger(__name__)


# ******************** STATIC SECTION
C8_FONTS = [0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
            0x20, 0x60, 0x20, 0x20, 0x70,  # 1
            0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
            0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
            0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
            0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
            0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
            0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
            0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
            0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
            0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
            0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
            0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
            0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
            0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
            0xF0, 0x80, 0xF0, 0x80, 0x80]  # F

FONT_SPRITE_SIZE = 5
MEMORY_SIZE = 4096
ROM_START_ADDRESS = 0x200
MAX_ROM_SIZE = MEMORY_SIZE - ROM_START_ADDRESS
NUM_REGISTERS = 16
NUM_KEYS = 16
STACK_SIZE = 16
SCREEN_HEIGHT = 32
SCREEN_WIDTH = 64


# ******************** ERRORS SECTION
class Chip8Error(Exception):
    """base class for every fatal condition raised while executing a program"""


class MemoryAccessError(Chip8Error, IndexError):
    def __init__(self, address, size=1):
        self.address = address
        self.size = size
        super().__init__(
            f"Memory access out of bounds: 0x{address:04x} (+{size}) outside 0x0000-0x{MEMORY_SIZE - 1:04x}"
        )


class StackError(Chip8Error, IndexError):
    pass


class StackOverflowError(StackError):
    def __init__(self):
        super().__init__(f"The CHIP-8 stack can contain at most {STACK_SIZE} addresses. Limit exceeded")


class StackUnderflowError(StackError):
    def __init__(self):
        super().__init__("Return from subroutine with an empty CHIP-8 stack")


class UnimplementedOpcodeError(Chip8Error, NotImplementedError):
    def __init__(self, opcode):
        self.opcode = opcode
        self.nibbles = nibbles(opcode)
        digits = " ".join(f"{n:X}" for n in self.nibbles)
        super().__init__(f"The opcode 0x{opcode:04x} (nibbles: {digits}) is not a CHIP-8 instruction")


# ******************** UTILITIES SECTION
def asm(msg):
    """decorator to log the ASM of the instruction being called"""
    def decorator(fn):
        @wraps(fn)
        def wrapper_fn(*args, **kwargs):
            mem_addr = args[0].pc - 2   # args[0] equals self, pc already points past the fetched opcode
            vals = fn(*args, **kwargs)  # use the locals() values of each decorated function in the message
            if logger.isEnabledFor(logging.DEBUG):
                vals['mem_addr'] = mem_addr
                logger.debug(msg.format(**vals))
        return wrapper_fn
    return decorator

def nibbles(opcode):
    """split a 16 bit opcode in its four 4 bit digits, most significant first"""
    return (
        (opcode & 0xF000) >> 12,
        (opcode & 0x0F00) >> 8,
        (opcode & 0x00F0) >> 4,
        opcode & 0x000F,
    )


# ******************** MEMORY SECTION
# ********** WRAPS A LIST TO REPRESENT A STACK WITH A LIMITED SIZE OF 16 ADDRESSES
class Stack:
    def __init__(self):
        self.addr_list = [0] * STACK_SIZE
        self.sp = 0

    def __len__(self):
        return self.sp

    def __repr__(self):
        return f"Stack({[hex(a) for a in self.addr_list[:self.sp]]})"

    def push(self, address):
        if self.sp >= STACK_SIZE:
            raise StackOverflowError()
        self.addr_list[self.sp] = address
        self.sp += 1

    def pop(self):
        if self.sp == 0:
            raise StackUnderflowError()
        self.sp -= 1
        return self.addr_list[self.sp]

# ********** WRAPS A LIST TO REPRESENT THE MAIN MEMORY WITH A LIMITED SIZE OF 4KB
class Memory:
    def __init__(self):
        self.inner = [0] * MEMORY_SIZE
        self.inner[0x00:0x00+len(C8_FONTS)] = C8_FONTS

    def __len__(self):
        return MEMORY_SIZE

    @staticmethod
    def _check(start, size=1):
        # negative indexes would silently wrap around on a python list
        if start < 0 or start + size > MEMORY_SIZE:
            raise MemoryAccessError(start, size)

    def _bounds(self, key):
        if isinstance(key, slice):
            start, stop = key.start or 0, key.stop
            if stop is None or key.step not in (None, 1) or stop < start:
                raise TypeError("Memory only supports contiguous [start:stop] slices")
            self._check(start, stop - start)
        else:
            self._check(key)

    def __setitem__(self, key, value):
        self._bounds(key)
        if isinstance(key, slice):
            value = [b & 0xFF for b in value]
            if len(value) != key.stop - (key.start or 0):
                raise ValueError("Memory slices cannot change size")
        else:
            value &= 0xFF
        self.inner[key] = value

    def __getitem__(self, key):
        self._bounds(key)
        return self.inner[key]

    def load_program(self, data):
        """copy the raw program bytes in memory starting from the ROM start address"""
        if len(data) > MAX_ROM_SIZE:
            raise ValueError(f"Program is {len(data)} bytes long, at most {MAX_ROM_SIZE} bytes fit in memory")
        self.inner[ROM_START_ADDRESS:ROM_START_ADDRESS+len(data)] = list(data)

class Keypad:
    def __init__(self):
        self.keys = [False] * NUM_KEYS

    def __getitem__(self, key):
        return self.keys[key]

    def __setitem__(self, key, pressed):
        if isinstance(key, bool) or not isinstance(key, int) or not 0 <= key < NUM_KEYS:
            raise ValueError(f"Key index must be in range 0x0-0x{NUM_KEYS - 1:x}, got {key!r}")
        self.keys[key] = bool(pressed)

    def untouched(self):
        return not any(self.keys)

    def first_pressed(self):
        """get the lowest numbered key currently pressed, None if there is none"""
        for key, pressed in enumerate(self.keys):
            if pressed:
                return key
        return None

# ********** MONOCHROME 64x32 DISPLAY, ONE BOOLEAN PER PIXEL, ROW-MAJOR
class Framebuffer:
    def __init__(self, w=SCREEN_WIDTH, h=SCREEN_HEIGHT):
        self.w, self.h = w, h
        self.buffer = [[False] * w for _ in range(h)]

    def read_pixel(self, x, y):
        """return True if pixel is ON, return False if pixel is OFF"""
        return self.buffer[y][x]

    def write_pixel(self, x, y, on):
        self.buffer[y][x] = bool(on)

    def clear(self):
        for row in self.buffer:
            row[:] = [False] * self.w

    def rows(self):
        """read-only snapshot of the display, indexed as [y][x]"""
        return tuple(tuple(row) for row in self.buffer)


# ******************** CPU SECTION
class Chip8:
    def __init__(self, rng=None):
        self.rng = rng if rng is not None else self._random_byte
        self.instructions = {
            0x0000: self._no_op,
            0x00E0: self._clear_screen,
            0x00EE: self._return,
            0x1000: self._jump,
            0x2000: self._call_addr,
            0x3000: self._skip_if_eq,
            0x4000: self._skip_if_not_eq,
            0x5000: self._skip_if_eq_regs,
            0x6000: self._set_vk,
            0x7000: self._add_to_vk,
            0x8000: self._set_vx_to_vy,
            0x8001: self._set_vx_or_vy,
            0x8002: self._set_vx_and_vy,
            0x8003: self._set_vx_xor_vy,
            0x8004: self._add_vx_vy,
            0x8005: self._sub_vx_vy,
            0x8006: self._shr,
            0x8007: self._subn_vx_vy,
            0x800E: self._shl,
            0x9000: self._skip_if_not_eq_regs,
            0xA000: self._set_idx,
            0xB000: self._jump_plus,
            0xC000: self._random_byte_and,
            0xD000: self._to_screen,
            0xE09E: self._skip_if_pressed,
            0xE0A1: self._skip_if_not_pressed,
            0xF007: self._set_vx_dt,
            0xF00A: self._wait_keypress,
            0xF015: self._set_dt_vx,
            0xF018: self._set_st,
            0xF01E: self._add_to_idx,
            0xF029: self._select_char,
            0xF033: self._bcd_repr,
            0xF055: self._store_vregs,
            0xF065: self._load_vregs,
        }
        self.reset()

    def __str__(self):
        registers = f"PC_REGISTER:0x{self.pc:04x} | IDX_REGISTER:0x{self.idx:04x} | VARIABLE_REGISTERS:{self.v_regs}"
        stack = f"STACK:{self.stack!r}"
        timers = f"DELAY_TIMER:{self.dt} | SOUND_TIMER:{self.st}"
        keys = f"KEYPAD:{[k for k in range(NUM_KEYS) if self.keypad[k]]}"
        return f"{registers}\n{stack}\n{timers}\n{keys}"

    @staticmethod
    def _random_byte():
        return random.randint(0, 255)

    # ********** PUBLIC SURFACE
    def reset(self):
        """restore the power-on state, discarding program, registers, timers and display"""
        self.mem = Memory()
        self.stack = Stack()
        self.keypad = Keypad()
        self.screen = Framebuffer()
        self.v_regs = [0] * NUM_REGISTERS
        self.pc = ROM_START_ADDRESS
        self.idx = 0    # specify where the sprites reside in memory
        self.dt = 0     # delay timer, active when non-zero
        self.st = 0     # sound timer, active when non-zero

    def load_program(self, data):
        self.mem.load_program(data)
        logger.debug(f"Loaded a {len(data)} bytes program at 0x{ROM_START_ADDRESS:04x}")

    def step(self):
        """emulate one machine cycle: fetch, decode and execute a single opcode"""
        # fetch (each instruction is two bytes long)
        opcode = self.fetch()
        # decode + execute
        instruction = self.decode(opcode)
        instruction(opcode)

    def tick_timers(self):
        """
        decrement delay and sound timers, never below zero
        return True when the sound timer just reached zero, the moment a beep should end
        """
        if self.dt > 0:
            self.dt -= 1
        sound_stopped = self.st == 1
        if self.st > 0:
            self.st -= 1
        return sound_stopped

    @property
    def sound_active(self):
        return self.st > 0

    def set_key(self, index, pressed):
        self.keypad[index] = pressed

    def framebuffer(self):
        return self.screen.rows()

    # ********** FETCH / DECODE
    def fetch(self):
        if self.pc + 1 >= MEMORY_SIZE:
            raise MemoryAccessError(self.pc, 2)
        opcode = self.mem[self.pc] << 8 | self.mem[self.pc + 1]
        self._goto_next_instruction()
        return opcode

    def decode(self, opcode):
        """decode opcodes using masks and return respective function"""
        # WATCH OUT: masks order is important!!!
        # as the for loop breaks out as soon as it finds a match
        masks = {
            0xFFFF: [0x0000,0x00E0,0x00EE],
            0xF0FF: [0xE09E,0xE0A1,0xF007,0xF00A,0xF015,0xF018,0xF01E,0xF029,0xF033,0xF055,0xF065],
            0xF00F: [0x5000,0x8000,0x8001,0x8002,0x8003,0x8004,0x8005,0x8006,0x8007,0x800E,0x9000],
            0xF000: [0x1000,0x2000,0x3000,0x4000,0x6000,0x7000,0xA000,0xB000,0xC000,0xD000],
        }
        for m, ops in masks.items():
            if (opcode & m) in ops:
                return self.instructions[opcode & m]
        raise UnimplementedOpcodeError(opcode)

    def _goto_next_instruction(self):
        self.pc += 0x2

    # ********** CONTROL FLOW
    @asm("mem_addr: 0x{mem_addr:04x}    instruction: NOP")
    def _no_op(self, opcode):
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: RET")
    def _return(self, opcode):
        """return from a subroutine"""
        self.pc = self.stack.pop()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: JP 0x{address:04x}")
    def _jump(self, opcode):
        address = opcode & 0x0FFF
        self.pc = address
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: CALL 0x{address:04x}")
    def _call_addr(self, opcode):
        address = opcode & 0x0FFF
        self.stack.push(self.pc)
        self.pc = address
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: JP V0, 0x{address:04x}")
    def _jump_plus(self, opcode):
        address = opcode & 0x0FFF
        v0 = self.v_regs[0x0]
        self.pc = address + v0
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SE V{x}, {comparison_value}")
    def _skip_if_eq(self, opcode):
        x = (opcode & 0x0F00) >> 8
        comparison_value = opcode & 0x00FF
        if self.v_regs[x] == comparison_value:
            self._goto_next_instruction()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SNE V{x}, {comparison_value}")
    def _skip_if_not_eq(self, opcode):
        x = (opcode & 0x0F00) >> 8
        comparison_value = opcode & 0x00FF
        if self.v_regs[x] != comparison_value:
            self._goto_next_instruction()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SE V{x}, V{y}")
    def _skip_if_eq_regs(self, opcode):
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        if self.v_regs[x] == self.v_regs[y]:
            self._goto_next_instruction()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SNE V{x}, V{y}")
    def _skip_if_not_eq_regs(self, opcode):
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        if self.v_regs[x] != self.v_regs[y]:
            self._goto_next_instruction()
        return locals()

    # ********** ARITHMETIC / LOGIC
    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD V{x}, {value}")
    def _set_vk(self, opcode):
        """set the value of one of the 16 variable registers, Vx"""
        x, value = (opcode & 0x0F00) >> 8, opcode & 0x00FF
        self.v_regs[x] = value
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: ADD V{x}, {value}")
    def _add_to_vk(self, opcode):
        """add to the value already present in one of the variable registers, VF is left alone"""
        x, value = (opcode & 0x0F00) >> 8, opcode & 0x00FF
        self.v_regs[x] = (self.v_regs[x] + value) & 0xFF    # keep only the lowest 8 bits from the result and store them in Vx
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD V{x}, V{y}")
    def _set_vx_to_vy(self, opcode):
        """set the value of Vx equal to that of Vy"""
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        self.v_regs[x] = self.v_regs[y]
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: OR V{x}, V{y}")
    def _set_vx_or_vy(self, opcode):
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        self.v_regs[x] |= self.v_regs[y]
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: AND V{x}, V{y}")
    def _set_vx_and_vy(self, opcode):
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        self.v_regs[x] &= self.v_regs[y]
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: XOR V{x}, V{y}")
    def _set_vx_xor_vy(self, opcode):
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        self.v_regs[x] ^= self.v_regs[y]
        return locals()

    # the flag is always written after Vx, so it survives when x is 0xF
    @asm("mem_addr: 0x{mem_addr:04x}    instruction: ADD V{x}, V{y}")
    def _add_vx_vy(self, opcode):
        """set the value of Vx to Vx + Vy, VF = carry"""
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        total = self.v_regs[x] + self.v_regs[y]
        self.v_regs[x] = total & 0xFF
        self.v_regs[0xF] = 1 if total > 0xFF else 0
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SUB V{x}, V{y}")
    def _sub_vx_vy(self, opcode):
        """set the value of Vx to Vx - Vy, VF = NOT borrow"""
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        no_borrow = 1 if self.v_regs[x] >= self.v_regs[y] else 0
        self.v_regs[x] = (self.v_regs[x] - self.v_regs[y]) & 0xFF
        self.v_regs[0xF] = no_borrow
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SUBN V{x}, V{y}")
    def _subn_vx_vy(self, opcode):
        """set the value of Vx to Vy - Vx, VF = NOT borrow"""
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        no_borrow = 1 if self.v_regs[y] >= self.v_regs[x] else 0
        self.v_regs[x] = (self.v_regs[y] - self.v_regs[x]) & 0xFF
        self.v_regs[0xF] = no_borrow
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SHR V{x}")
    def _shr(self, opcode):
        """set Vx equal to Vx SHR 1, Vy is ignored"""
        x = (opcode & 0x0F00) >> 8
        lsb = self.v_regs[x] & 0x1
        self.v_regs[x] >>= 1
        self.v_regs[0xF] = lsb
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SHL V{x}")
    def _shl(self, opcode):
        """set Vx equal to Vx SHL 1, Vy is ignored"""
        x = (opcode & 0x0F00) >> 8
        msb = (self.v_regs[x] & 0x80) >> 7
        self.v_regs[x] = (self.v_regs[x] << 1) & 0xFF
        self.v_regs[0xF] = msb
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: RND V{x}, 0x{kk:02x}")
    def _random_byte_and(self, opcode):
        x, kk = (opcode & 0x0F00) >> 8, opcode & 0x00FF
        rnd = self.rng() & 0xFF
        self.v_regs[x] = rnd & kk
        return locals()

    # ********** MEMORY / INDEX REGISTER
    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD I, 0x{value:03x}")
    def _set_idx(self, opcode):
        """set the value of the I register"""
        value = opcode & 0x0FFF
        self.idx = value
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: ADD I, V{register}")
    def _add_to_idx(self, opcode):
        """set I = I + Vx"""
        register = (opcode & 0x0F00) >> 8
        self.idx = (self.idx + self.v_regs[register]) & 0xFFFF
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD F, V{register}")
    def _select_char(self, opcode):
        """set I to location of sprite for digit Vx"""
        register = (opcode & 0x0F00) >> 8
        self.idx = self.v_regs[register] * FONT_SPRITE_SIZE
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD B, V{x}")
    def _bcd_repr(self, opcode):
        """store the hundreds digit of Vx in memory at I, the tens digit at I+1, the ones digit at I+2"""
        x = (opcode & 0x0F00) >> 8
        value = self.v_regs[x]
        hundreds, tens, ones = value // 100, (value // 10) % 10, value % 10
        self.mem[self.idx:self.idx+3] = [hundreds, tens, ones]
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD [I], V{x}")
    def _store_vregs(self, opcode):
        """store registers V0 through Vx (included) in memory starting at location I"""
        x = (opcode & 0x0F00) >> 8
        self.mem[self.idx:self.idx+x+1] = self.v_regs[:x+1]
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD V{x}, [I]")
    def _load_vregs(self, opcode):
        """read registers V0 through Vx (included) from memory starting at location I"""
        x = (opcode & 0x0F00) >> 8
        self.v_regs[:x+1] = self.mem[self.idx:self.idx+x+1]
        return locals()

    # ********** DISPLAY
    @asm("mem_addr: 0x{mem_addr:04x}    instruction: CLS")
    def _clear_screen(self, opcode):
        self.screen.clear()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: DRW V{x}, V{y}, {n_bytes}")
    def _to_screen(self, opcode):
        """display n-byte sprite starting at memory location I at (Vx, Vy), set VF = collision"""
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        n_bytes = opcode & 0x000F
        # read the whole sprite first, an out of bounds read must not leave a half drawn sprite
        sprite = self.mem[self.idx:self.idx+n_bytes]
        x_origin, y_origin = self.v_regs[x], self.v_regs[y]
        collision = 0
        for i, sprite_byte in enumerate(sprite):
            # increment y by one for each new sprite's byte read
            # this allows for wrap around of displayed sprites
            y_coordinate = (y_origin + i) % self.screen.h
            for j in range(8):      # most significant bit is the leftmost pixel
                if not (sprite_byte >> (7 - j)) & 0x1:
                    continue
                x_coordinate = (x_origin + j) % self.screen.w
                # sprites are XORed onto the existing screen and if this
                # causes any pixel to be erased then VF=1, otherwise VF=0
                pixel_state = self.screen.read_pixel(x_coordinate, y_coordinate)
                if pixel_state:
                    collision = 1
                self.screen.write_pixel(x_coordinate, y_coordinate, not pixel_state)
        self.v_regs[0xF] = collision
        return locals()

    # ********** INPUT / TIMERS
    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SKP V{x}")
    def _skip_if_pressed(self, opcode):
        """skip the following instruction if the key corresponding to the hex value stored in Vx is pressed"""
        x = (opcode & 0x0F00) >> 8
        key = self.v_regs[x] & 0xF
        if self.keypad[key]:
            self._goto_next_instruction()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SKNP V{x}")
    def _skip_if_not_pressed(self, opcode):
        """skip the following instruction if the key corresponding to the hex value stored in Vx is NOT pressed"""
        x = (opcode & 0x0F00) >> 8
        key = self.v_regs[x] & 0xF
        if not self.keypad[key]:
            self._goto_next_instruction()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD V{x}, K")
    def _wait_keypress(self, opcode):
        """wait for a key press and store its value in Vx"""
        x = (opcode & 0x0F00) >> 8
        if self.keypad.untouched():
            self.pc -= 0x2      # stay on the same instruction until a key is pressed
        else:
            self.v_regs[x] = self.keypad.first_pressed()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD V{x}, DT")
    def _set_vx_dt(self, opcode):
        """set Vx = DT (delay timer) value"""
        x = (opcode & 0x0F00) >> 8
        self.v_regs[x] = self.dt
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD DT, V{x}")
    def _set_dt_vx(self, opcode):
        """set DT (delay timer) = Vx"""
        x = (opcode & 0x0F00) >> 8
        self.dt = self.v_regs[x]
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD ST, V{register}")
    def _set_st(self, opcode):
        """set ST = Vx"""
        register = (opcode & 0x0F00) >> 8
        self.st = self.v_regs[register]
        return locals()
