"""Window, palette and command line for the demos."""

from __future__ import annotations

import argparse

import pygame

from plasmatic.scenes import X_RES, Y_RES, NoiseScene, PlasmaScene, TextScene

SCALE = 3
FPS = 70

_EGA = (
    (0, 0, 0), (0, 0, 42), (0, 42, 0), (0, 42, 42),
    (42, 0, 0), (42, 0, 42), (42, 21, 0), (42, 42, 42),
    (21, 21, 21), (21, 21, 63), (21, 63, 21), (21, 63, 63),
    (63, 21, 21), (63, 21, 63), (63, 63, 21), (63, 63, 63),
)
_GRAYS = (0, 5, 8, 11, 14, 17, 20, 24, 28, 32, 36, 40, 45, 50, 56, 63)
_RAMPS = (
    (0, 16, 31, 47, 63), (31, 39, 47, 55, 63), (45, 49, 54, 58, 63),
    (0, 7, 14, 21, 28), (14, 17, 21, 24, 28), (20, 22, 24, 26, 28),
    (0, 4, 8, 12, 16), (8, 10, 12, 14, 16), (11, 12, 13, 15, 16),
)


def _hue_wheel(levels: tuple[int, ...]) -> list[tuple[int, int, int]]:
    lo, hi = levels[0], levels[-1]
    rising = levels[:4]
    falling = levels[4:0:-1]
    wheel = [(v, lo, hi) for v in rising]
    wheel += [(hi, lo, v) for v in falling]
    wheel += [(hi, v, lo) for v in rising]
    wheel += [(v, hi, lo) for v in falling]
    wheel += [(lo, hi, v) for v in rising]
    wheel += [(lo, v, hi) for v in falling]
    return wheel


def _widen(value: int) -> int:
    return (value << 2) | (value >> 4)


def vga_palette() -> list[tuple[int, int, int]]:
    """The default 256-colour VGA palette as 8-bit RGB triples."""
    six_bit = list(_EGA)
    six_bit += [(g, g, g) for g in _GRAYS]
    for levels in _RAMPS:
        six_bit += _hue_wheel(levels)
    six_bit += [(0, 0, 0)] * (256 - len(six_bit))
    return [(_widen(r), _widen(g), _widen(b)) for r, g, b in six_bit]


def run_scene(scene, title: str = "plasmatic") -> int:
    """Show a scene in a window until Escape is pressed; return the frames drawn."""
    pygame.display.init()
    try:
        screen = pygame.display.set_mode((X_RES * SCALE, Y_RES * SCALE))
        pygame.display.set_caption(title)
        palette = vga_palette()
        clock = pygame.time.Clock()
        frames = 0
        while True:
            quitting = False
            toggled = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    quitting = True
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        quitting = True
                    elif event.key == pygame.K_h and hasattr(scene, "toggle_greetz"):
                        scene.toggle_greetz()
                        toggled = True
            if quitting:
                break
            if toggled:
                continue
            frame = scene.render()
            surface = pygame.image.frombuffer(frame, (X_RES, Y_RES), "P")
            surface.set_palette(palette)
            screen.blit(pygame.transform.scale(surface, screen.get_size()), (0, 0))
            pygame.display.flip()
            frames += 1
            clock.tick(FPS)
        return frames
    finally:
        pygame.display.quit()


def _wait_for_key() -> tuple[str, int]:
    pygame.display.init()
    try:
        pygame.display.set_mode((X_RES, Y_RES))
        pygame.display.set_caption("press any key")
        while True:
            event = pygame.event.wait()
            if event.type == pygame.KEYDOWN:
                char = event.unicode or ""
                return char, ord(char) if char else event.key
            if event.type == pygame.QUIT:
                return "", 0
    finally:
        pygame.display.quit()


def main(argv: list[str] | None = None) -> int:
    """Run one of the demos chosen on the command line."""
    parser = argparse.ArgumentParser(prog="plasmatic", description="Plasma demo effects.")
    parser.add_argument(
        "demo",
        nargs="?",
        default="plasma",
        choices=("plasma", "noise", "text", "keys", "hello", "whatev"),
    )
    parser.add_argument("--seed", type=int, default=None, help="noise seed for the plasma")
    args = parser.parse_args(argv)

    if args.demo == "hello":
        print("Hello world!", end="")
    elif args.demo == "whatev":
        print("it even runs on FreeDOS", end="")
    elif args.demo == "keys":
        print("Press any key")
        char, code = _wait_for_key()
        print(f"You pressed char {char} decimal {code}")
    elif args.demo == "plasma":
        run_scene(PlasmaScene(args.seed), "PLASMATIC")
        print("PLASMATIC - ML YOUNG 2025")
        print("thanks for watching :3")
    elif args.demo == "noise":
        run_scene(NoiseScene(), "noise")
        print("Demo done")
    else:
        run_scene(TextScene(), "text")
        print("Demo done!!")
    return 0