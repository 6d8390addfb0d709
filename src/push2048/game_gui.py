import argparse
import logging
import random
import sys

import pygame

from push2048.game import DEFAULT_SIZE, Game2048
from push2048.log import setup_logging

logger = logging.getLogger(__name__)


COLORS = {
    'background': (0, 0, 0),
    'text_dark': (0, 0, 0),
    'text_light': (255, 255, 255),
    'overlay': (0, 0, 0, 192),
}

# tile colors, picked by log2(value) - 1 and wrapping around for huge tiles
TILE_COLORS = [
    (0, 0, 96), (0, 96, 96), (0, 96, 0), (96, 96, 0), (96, 48, 0), (96, 0, 0),
    (96, 0, 96), (96, 0, 192), (0, 0, 192), (0, 96, 192), (0, 192, 192), (0, 192, 96),
    (0, 192, 0), (96, 192, 0), (192, 192, 0), (192, 96, 0), (192, 0, 0),
]

# each direction answers to a letter and to the matching numpad key
KEY_DIRECTIONS = {
    pygame.K_q: 'up_left', pygame.K_KP7: 'up_left',
    pygame.K_w: 'up', pygame.K_KP8: 'up',
    pygame.K_e: 'up_right', pygame.K_KP9: 'up_right',
    pygame.K_a: 'left', pygame.K_KP4: 'left',
    pygame.K_d: 'right', pygame.K_KP6: 'right',
    pygame.K_z: 'down_left', pygame.K_KP1: 'down_left',
    pygame.K_x: 'down', pygame.K_KP2: 'down',
    pygame.K_c: 'down_right', pygame.K_KP3: 'down_right',
}

# key hint letters and where they sit around the board, as fractions of the window
KEY_HINTS = [
    ("Q", 1 / 12, 1 / 12), ("W", 1 / 2, 1 / 12), ("E", 11 / 12, 1 / 12),
    ("A", 1 / 12, 1 / 2), ("D", 11 / 12, 1 / 2),
    ("Z", 1 / 12, 11 / 12), ("X", 1 / 2, 11 / 12), ("C", 11 / 12, 11 / 12),
]


def get_tile_color(value):
    """get background color for a tile value"""
    if value == 0:
        return COLORS['background']
    return TILE_COLORS[(value.bit_length() - 2) % len(TILE_COLORS)]


class GameGUI:
    def __init__(self, size=DEFAULT_SIZE, cell_size=100, cell_margin=10, seed=None):
        """initialize game GUI"""
        pygame.init()

        self.game = Game2048(size=size, rng=random.Random(seed))

        # GUI settings
        self.cell_size = cell_size
        self.cell_margin = cell_margin

        # the board sits in the middle, one cell wide border for the key hints
        self.border = cell_size
        grid_size = size * cell_size + (size + 1) * cell_margin
        self.window_width = grid_size + 2 * self.border
        self.window_height = grid_size + 2 * self.border

        # create window
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("2048")

        # fonts
        self.font_large = pygame.font.Font(None, self.window_height // 8)
        self.font_medium = pygame.font.Font(None, self.window_height // 16)
        self.font_small = pygame.font.Font(None, self.window_height // 24)

        self.clock = pygame.time.Clock()
        self.needs_redraw = True

    def draw_board(self):
        """draw the game board"""
        self.screen.fill(COLORS['background'])

        for row in range(self.game.size):
            for col in range(self.game.size):
                self.draw_cell(row, col)

        if self.game.game_over:
            self.draw_game_over()
        else:
            self.draw_key_hints()

    def draw_cell(self, row, col):
        """draw a single cell of the grid"""
        value = self.game.board[row][col]

        x = self.border + col * (self.cell_size + self.cell_margin) + self.cell_margin
        y = self.border + row * (self.cell_size + self.cell_margin) + self.cell_margin

        cell_rect = pygame.Rect(x, y, self.cell_size, self.cell_size)
        pygame.draw.rect(self.screen, get_tile_color(value), cell_rect)

        if value != 0:
            # shadowed number so it reads on both dark and bright tiles
            center = cell_rect.center
            shift = self.window_height // 256 + 1
            self.draw_text(str(value), self.font_medium, COLORS['text_dark'], (center[0] + shift, center[1] + shift))
            self.draw_text(str(value), self.font_medium, COLORS['text_light'], center)

    def draw_key_hints(self):
        for letter, fx, fy in KEY_HINTS:
            center = (int(self.window_width * fx), int(self.window_height * fy))
            self.draw_text(letter, self.font_medium, COLORS['text_light'], center)

    def draw_game_over(self):
        """darken the board and ask for a new game"""
        overlay = pygame.Surface((self.window_width, self.window_height), pygame.SRCALPHA)
        overlay.fill(COLORS['overlay'])
        self.screen.blit(overlay, (0, 0))

        shift = self.window_height // 128 + 1
        for text, fy in (("Game over", 2 / 5), ("Press SPACE", 3 / 5)):
            center = (self.window_width // 2, int(self.window_height * fy))
            self.draw_text(text, self.font_large, COLORS['text_dark'], (center[0] + shift, center[1] + shift))
            self.draw_text(text, self.font_large, COLORS['text_light'], center)

    def draw_text(self, text, font, color, center):
        surface = font.render(text, True, color)
        rect = surface.get_rect()
        rect.center = center
        self.screen.blit(surface, rect)

    def handle_keypress(self, key):
        """keyboard input"""
        if key == pygame.K_ESCAPE:
            return False  # quit

        if key == pygame.K_r or (key == pygame.K_SPACE and self.game.game_over):
            self.game.new_game()
            self.needs_redraw = True
            logger.info("game restarted")

        elif key in KEY_DIRECTIONS:
            if self.game.push(KEY_DIRECTIONS[key]):
                self.needs_redraw = True
                if self.game.game_over:
                    logger.info("game over, max tile %d", self.game.max_tile())

        return True  # continue

    def run(self):
        """main loop"""
        print("2048 Game Started!")
        print("Q W E / A D / Z X C (or the numpad) push the tiles")
        print("Press R to restart, ESC to quit")
        print()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self.handle_keypress(event.key)
                elif event.type in (pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED):
                    self.needs_redraw = True

            if self.needs_redraw:
                self.draw_board()
                pygame.display.flip()
                self.needs_redraw = False

            self.clock.tick(60)

        pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play 2048 with eight push directions")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="board size N (N x N cells)")
    parser.add_argument("--cell-size", type=int, default=100, help="tile size in pixels")
    parser.add_argument("--seed", type=int, default=None, help="seed for tile placement")
    parser.add_argument("--log-level", default="INFO", help="logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)
    try:
        gui = GameGUI(size=args.size, cell_size=args.cell_size, seed=args.seed)
        gui.run()
    except Exception:
        logger.exception("Error running game")
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
