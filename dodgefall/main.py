#!/usr/bin/env python3
"""
Dodgefall - Standalone entry point.

Usage:
    python -m dodgefall
    python -m dodgefall --fullscreen
    python -m dodgefall --width 480 --height 800 --profile frantic --seed 7
"""
import argparse
import sys
from typing import Any, Dict, List, Optional

import pygame

from dodgefall import config
from dodgefall.game_mode import DodgefallMode
from dodgefall.input.input_manager import InputManager
from dodgefall.input.sources.pygame_source import PygameInputSource
from dodgefall.logging import close_all_sinks, create_sink_for_module, get_logger, register_sink
from dodgefall.models.primitives import Viewport
from dodgefall.tuning import TuningError

log = get_logger('main')

BORDER_COLOR = (0, 0, 0)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser from the game's declared ARGUMENTS."""
    parser = argparse.ArgumentParser(description=f"{DodgefallMode.NAME}: {DodgefallMode.DESCRIPTION}")
    parser.add_argument('--width', type=int, default=config.SCREEN_WIDTH, help='Window width')
    parser.add_argument('--height', type=int, default=config.SCREEN_HEIGHT, help='Window height')
    parser.add_argument('--fullscreen', action='store_true', default=config.FULLSCREEN,
                        help='Run fullscreen')

    for arg in DodgefallMode.get_arguments():
        kwargs: Dict[str, Any] = {'help': arg.get('help', '')}
        if 'action' in arg:
            kwargs['action'] = arg['action']
        else:
            kwargs['type'] = arg.get('type', str)
        if 'default' in arg:
            kwargs['default'] = arg['default']
        if 'choices' in arg:
            kwargs['choices'] = arg['choices']
        parser.add_argument(arg['name'], **kwargs)

    return parser


def playfield_rect(screen_size, viewport: Viewport) -> pygame.Rect:
    """Center the viewport in the window, clipped to the window."""
    screen_rect = pygame.Rect((0, 0), screen_size)
    rect = pygame.Rect(0, 0, int(viewport.width), int(viewport.height))
    rect.center = screen_rect.center
    return rect.clip(screen_rect)


def main(argv: Optional[List[str]] = None) -> int:
    """Run Dodgefall."""
    args = build_parser().parse_args(argv)

    pygame.init()

    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption(DodgefallMode.NAME)
    width, height = screen.get_size()

    register_sink('session', create_sink_for_module('session'))

    try:
        game = DodgefallMode(
            width,
            height,
            profile=args.profile,
            seed=args.seed,
            boon_stacking=args.boon_stacking,
        )
    except TuningError as e:
        log.error("%s", e)
        close_all_sinks()
        pygame.quit()
        return 2

    source = PygameInputSource(playfield_rect(screen.get_size(), game.session.viewport))
    input_manager = InputManager(source)

    info = DodgefallMode.get_info()
    print("=" * 50)
    print(f"{info['name'].upper()} v{info['version']}")
    print("=" * 50)
    print(f"\n{info['description']}")
    print("\nControls:")
    print("  - LEFT/RIGHT or A/D to move (or touch either half)")
    print("  - SPACE/ENTER or tap to start and restart")
    print("  - ESC to quit")
    print("=" * 50)

    clock = pygame.time.Clock()
    running = True

    while running:
        dt = clock.tick(config.FPS) / 1000.0

        # Input source consumes steering/touch events and re-posts the rest
        input_manager.update(dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.VIDEORESIZE and not args.fullscreen:
                screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                game.resize(event.w, event.h)
                source.set_playfield(playfield_rect(screen.get_size(), game.session.viewport))

        game.handle_input(input_manager.get_events())
        game.update(dt)

        screen.fill(BORDER_COLOR)
        game.render(screen.subsurface(playfield_rect(screen.get_size(), game.session.viewport)))
        pygame.display.flip()

    log.info("Exiting with score %d", game.get_score())
    close_all_sinks()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
