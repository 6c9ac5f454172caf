"""
app.py
Color Blocks - pygame front-end, with 2048 and Minesweeper from the same menu

Controls:
- Color Blocks: drag a piece from the tray onto the board and release to place it
  U - undo the last placement (once per game), H - hint (once per game)
- 2048: arrow keys slide the tiles, C keeps playing after reaching 2048
- Minesweeper: left click reveals, right click flags, 1/2/3 picks easy/medium/hard
- R - restart game
- Esc - back to menu / quit from the menu
- Menu: Up/Down/Enter to navigate

Scores saved to: color_blocks_scores.json (override with COLOR_BLOCKS_SCORES)
Optional assets folder: put sounds in ./assets/ (place.wav, clear.wav) to enable sfx
"""

import logging
import os
import sys
from collections import namedtuple

import pygame

from .config import (ACCENT, ASSETS, BG, BOARD_BG, CELL, COLOR_BLOCKS_ID, EMPTY, EMPTY_COLOR,
                     FPS, GAME_2048_ID, GRID_SIZE, GRID_X, GRID_Y, LINE, MINESWEEPER_ID,
                     PALETTE, POOL_SIZE, SCREEN_H, SCREEN_W, TEXT, TRAY_CELL, TRAY_Y)
from .engine import Game
from .game2048 import Game2048, tile_style
from .minesweeper import FLAGGED, LOST, REVEALED, WON, Minesweeper
from .scores import ScoreStore

log = logging.getLogger(__name__)

TRAY_GAP = SCREEN_W // POOL_SIZE
MENU_OPTIONS = ["Color Blocks", "2048", "Minesweeper", "Highscore", "Quit"]
# menu entry -> play state
MENU_STATES = {0: "play", 1: "2048", 2: "mines", 3: "highscore"}
GAME_TITLES = [("Color Blocks", COLOR_BLOCKS_ID), ("2048", GAME_2048_ID),
               ("Minesweeper", MINESWEEPER_ID)]

# piece being dragged and which of its cells the pointer holds
DragState = namedtuple("DragState", "index grab_x grab_y")

# 2048 board
TILE = 110
TILE_GAP = 10
BOARD_2048 = 4 * TILE + 5 * TILE_GAP
BOARD_2048_X = (SCREEN_W - BOARD_2048) // 2

KEY_DIRECTIONS = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
}
DIFFICULTY_KEYS = {pygame.K_1: "easy", pygame.K_2: "medium", pygame.K_3: "hard"}

NUMBER_COLORS = {1: (70, 130, 255), 2: (60, 170, 80), 3: (230, 70, 70), 4: (120, 60, 200),
                 5: (170, 60, 40), 6: (40, 160, 170), 7: (30, 30, 30), 8: (120, 120, 120)}


# ----------------------- Geometry -----------------------
def screen_to_grid(mx, my):
    gx = (mx - GRID_X) // CELL
    gy = (my - GRID_Y) // CELL
    if 0 <= gx < GRID_SIZE and 0 <= gy < GRID_SIZE:
        return int(gx), int(gy)
    return None


def tray_origin(index, shape):
    # top-left pixel of a piece drawn centred in its tray slot
    cx = index * TRAY_GAP + TRAY_GAP // 2
    cy = TRAY_Y + 60
    return cx - (shape.width * TRAY_CELL) // 2, cy - (shape.height * TRAY_CELL) // 2


def tray_hit(pool, mx, my):
    """DragState for the tray piece cell under the pointer, or None."""
    for index, piece in enumerate(pool):
        if piece.placed:
            continue
        ox, oy = tray_origin(index, piece.shape)
        cx = (mx - ox) // TRAY_CELL
        cy = (my - oy) // TRAY_CELL
        if (cx, cy) in piece.shape.cells:
            return DragState(index, int(cx), int(cy))
    return None


def drop_anchor(drag, mx, my):
    # board cell for the shape's top-left, given the cell of the shape the pointer holds
    cell = screen_to_grid(mx, my)
    if cell is None:
        return None
    return cell[0] - drag.grab_x, cell[1] - drag.grab_y


def tile_rect(x, y):
    return pygame.Rect(BOARD_2048_X + TILE_GAP + x * (TILE + TILE_GAP),
                       GRID_Y + TILE_GAP + y * (TILE + TILE_GAP), TILE, TILE)


def mine_cell_size(mines):
    return min((SCREEN_W - 40) // mines.cols, 48)


def mine_origin(mines):
    size = mine_cell_size(mines)
    return (SCREEN_W - mines.cols * size) // 2, GRID_Y


def mine_cell_at(mines, mx, my):
    """(row, col) of the Minesweeper cell under the pointer, or None."""
    size = mine_cell_size(mines)
    ox, oy = mine_origin(mines)
    col = (mx - ox) // size
    row = (my - oy) // size
    if mines.inside(row, col):
        return int(row), int(col)
    return None


# ----------------------- Sound -----------------------
def load_sound(name):
    p = os.path.join(ASSETS, name)
    if os.path.exists(p):
        try:
            return pygame.mixer.Sound(p)
        except pygame.error as e:
            log.warning("could not load %s: %s", p, e)
    return None


# ----------------------- Drawing -----------------------
_font_cache = {}


def sized_font(size):
    if size not in _font_cache:
        _font_cache[size] = pygame.font.SysFont(None, size)
    return _font_cache[size]


def draw_cell(screen, rect, color):
    pygame.draw.rect(screen, color, rect, border_radius=8)
    if color != EMPTY_COLOR:
        inner = rect.inflate(-8, -8)
        s = pygame.Surface((inner.w, inner.h), pygame.SRCALPHA)
        pygame.draw.ellipse(s, (255, 255, 255, 26), (0, 0, inner.w, inner.h // 2))
        screen.blit(s, inner.topleft)


def draw_board(screen, snap):
    pygame.draw.rect(screen, BOARD_BG, (GRID_X - 6, GRID_Y - 6, GRID_SIZE * CELL + 12,
                                        GRID_SIZE * CELL + 12), border_radius=10)
    for x in range(GRID_SIZE):
        for y in range(GRID_SIZE):
            rect = pygame.Rect(GRID_X + x * CELL + 3, GRID_Y + y * CELL + 3, CELL - 6, CELL - 6)
            val = snap.board.get(x, y)
            draw_cell(screen, rect, EMPTY_COLOR if val is EMPTY else PALETTE[val])
    for i in range(GRID_SIZE + 1):
        pygame.draw.line(screen, LINE, (GRID_X + i * CELL, GRID_Y),
                         (GRID_X + i * CELL, GRID_Y + GRID_SIZE * CELL))
        pygame.draw.line(screen, LINE, (GRID_X, GRID_Y + i * CELL),
                         (GRID_X + GRID_SIZE * CELL, GRID_Y + i * CELL))


def draw_tray(screen, snap, drag):
    for index, piece in enumerate(snap.pool):
        if piece.placed or (drag and drag.index == index):
            continue
        ox, oy = tray_origin(index, piece.shape)
        for dx, dy in piece.shape.cells:
            rect = pygame.Rect(ox + dx * TRAY_CELL, oy + dy * TRAY_CELL, TRAY_CELL - 3, TRAY_CELL - 3)
            pygame.draw.rect(screen, PALETTE[piece.color], rect, border_radius=5)


def draw_hud(screen, fonts, snap):
    font, big = fonts[0], fonts[1]
    screen.blit(big.render(f"Score: {snap.score}", True, TEXT), (20, 20))
    screen.blit(font.render(f"Best: {snap.best_score}", True, (200, 200, 210)), (20, 62))
    info = f"Undo (U): {snap.undo_credits}   Hint (H): {snap.hint_credits}   R restart  Esc menu"
    screen.blit(font.render(info, True, (180, 180, 190)), (20, 100))


def draw_ghost(screen, game, snap, drag, mouse_pos):
    # advisory only: the real check happens again on release
    anchor = drop_anchor(drag, *mouse_pos)
    piece = snap.pool[drag.index]
    if anchor is not None and game.preview(drag.index, *anchor):
        s = pygame.Surface((CELL - 6, CELL - 6), pygame.SRCALPHA)
        s.fill((*PALETTE[piece.color], 110))
        for dx, dy in piece.shape.cells:
            screen.blit(s, (GRID_X + (anchor[0] + dx) * CELL + 3, GRID_Y + (anchor[1] + dy) * CELL + 3))
    # the piece itself follows the pointer
    mx, my = mouse_pos
    for dx, dy in piece.shape.cells:
        rect = pygame.Rect(mx + (dx - drag.grab_x) * CELL - CELL // 2,
                           my + (dy - drag.grab_y) * CELL - CELL // 2, CELL - 6, CELL - 6)
        draw_cell(screen, rect, PALETTE[piece.color])


def draw_hint(screen, snap, hint):
    piece = snap.pool[hint.index]
    if piece.placed:
        return
    for dx, dy in piece.shape.cells:
        rect = pygame.Rect(GRID_X + (hint.x + dx) * CELL + 3, GRID_Y + (hint.y + dy) * CELL + 3,
                           CELL - 6, CELL - 6)
        pygame.draw.rect(screen, ACCENT, rect, width=3, border_radius=8)


def draw_banner(screen, fonts, title, line, y):
    font, big = fonts[0], fonts[1]
    surf = big.render(title, True, (240, 120, 120))
    screen.blit(surf, surf.get_rect(center=(SCREEN_W // 2, y)))
    info = font.render(line, True, (220, 200, 200))
    screen.blit(info, info.get_rect(center=(SCREEN_W // 2, y + 36)))


def draw_2048(screen, fonts, game):
    font, big = fonts[0], fonts[1]
    screen.blit(big.render(f"Score: {game.score}", True, TEXT), (20, 20))
    screen.blit(font.render(f"Best: {game.best_score}", True, (200, 200, 210)), (20, 62))
    screen.blit(font.render("Arrows slide   R restart  Esc menu", True, (180, 180, 190)), (20, 100))
    pygame.draw.rect(screen, (187, 173, 160), (BOARD_2048_X, GRID_Y, BOARD_2048, BOARD_2048),
                     border_radius=10)
    for x in range(game.size):
        for y in range(game.size):
            value = game.grid[x][y]
            style = tile_style(value)
            rect = tile_rect(x, y)
            pygame.draw.rect(screen, style.background, rect, border_radius=6)
            if value:
                # sizes in the table are for small tiles; these are about twice as big
                txt = sized_font(style.font_size * 2).render(str(value), True, style.text)
                screen.blit(txt, txt.get_rect(center=rect.center))
    y = GRID_Y + BOARD_2048 + 50
    if game.is_over:
        draw_banner(screen, fonts, "GAME OVER", "No moves left. Press R to restart.", y)
    elif game.won and not game.keep_going:
        draw_banner(screen, fonts, "2048!", "Press C to keep playing or R to restart.", y)


def draw_minesweeper(screen, fonts, game):
    font, big = fonts[0], fonts[1]
    screen.blit(big.render(f"Mines left: {game.mines_left}", True, TEXT), (20, 20))
    info = f"{game.difficulty}   1/2/3 difficulty   R restart  Esc menu"
    screen.blit(font.render(info, True, (180, 180, 190)), (20, 100))
    size = mine_cell_size(game)
    ox, oy = mine_origin(game)
    number_font = sized_font(size)
    for r in range(game.rows):
        for c in range(game.cols):
            cell = game.board[r][c]
            rect = pygame.Rect(ox + c * size + 1, oy + r * size + 1, size - 2, size - 2)
            if cell.status == REVEALED:
                pygame.draw.rect(screen, (200, 200, 205) if not cell.mine else (230, 80, 80), rect)
                if cell.mine:
                    pygame.draw.circle(screen, (20, 20, 20), rect.center, size // 4)
                elif cell.adjacent:
                    txt = number_font.render(str(cell.adjacent), True, NUMBER_COLORS[cell.adjacent])
                    screen.blit(txt, txt.get_rect(center=rect.center))
            else:
                pygame.draw.rect(screen, (110, 110, 130), rect, border_radius=3)
                if cell.status == FLAGGED:
                    pygame.draw.polygon(screen, (230, 70, 70), [
                        (rect.centerx - size // 6, rect.top + size // 5),
                        (rect.centerx + size // 4, rect.centery - size // 8),
                        (rect.centerx - size // 6, rect.centery)])
    y = oy + game.rows * size + 50
    if game.status == WON:
        draw_banner(screen, fonts, "YOU WIN", f"Score {game.score}. Press R to play again.", y)
    elif game.status == LOST:
        draw_banner(screen, fonts, "BOOM", "You hit a mine. Press R to play again.", y)


def draw_menu(screen, fonts, selected):
    big, title = fonts[1], fonts[2]
    title_s = title.render("Color Blocks", True, ACCENT)
    screen.blit(title_s, ((SCREEN_W - title_s.get_width()) // 2, 60))
    for i, opt in enumerate(MENU_OPTIONS):
        color = TEXT if i == selected else (170, 170, 170)
        txt = big.render(opt, True, color)
        screen.blit(txt, ((SCREEN_W - txt.get_width()) // 2, 220 + i * 86))


def draw_highscore_screen(screen, fonts, store):
    font, big, title = fonts
    t = title.render("High Scores", True, (210, 210, 255))
    screen.blit(t, ((SCREEN_W - t.get_width()) // 2, 60))
    for i, (name, game_id) in enumerate(GAME_TITLES):
        stats = store.get(game_id)
        y = 200 + i * 120
        line = big.render(f"{name}: {stats['highScore']}", True, TEXT)
        screen.blit(line, ((SCREEN_W - line.get_width()) // 2, y))
        plays = font.render(f"Games played: {stats['playCount']}", True, (180, 180, 200))
        screen.blit(plays, ((SCREEN_W - plays.get_width()) // 2, y + 44))
    sub = font.render("Press Backspace to return", True, (180, 180, 200))
    screen.blit(sub, ((SCREEN_W - sub.get_width()) // 2, SCREEN_H - 90))


# ----------------------- Main Loop -----------------------
def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    try:
        pygame.mixer.init()
    except pygame.error as e:
        log.warning("no audio: %s", e)
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Color Blocks")
    clock = pygame.time.Clock()
    fonts = (pygame.font.SysFont(None, 22), pygame.font.SysFont(None, 36),
             pygame.font.SysFont(None, 56))
    snd_place = load_sound("place.wav") if pygame.mixer.get_init() else None
    snd_clear = load_sound("clear.wav") if pygame.mixer.get_init() else None

    store = ScoreStore()
    game = None
    tiles = None
    mines = None
    state = "menu"  # menu, play, 2048, mines, highscore
    selected_menu = 0
    drag = None
    hint = None
    running = True

    def start():
        nonlocal game, drag, hint
        if game is None:
            game = Game(store=store)
        else:
            game.new_game()
        drag = hint = None

    def start_2048():
        nonlocal tiles
        if tiles is None:
            tiles = Game2048(store=store)
        else:
            tiles.new_game()

    def start_mines(difficulty=None):
        nonlocal mines
        if mines is None or (difficulty and difficulty != mines.difficulty):
            mines = Minesweeper(difficulty or "easy", store=store)
        else:
            mines.new_game()

    def leave():
        if game is not None:
            game.leave()

    def choose(i):
        nonlocal state, running
        if i not in MENU_STATES:
            leave()
            running = False
            return
        state = MENU_STATES[i]
        if state == "play":
            start()
        elif state == "2048":
            start_2048()
        elif state == "mines":
            start_mines()

    while running:
        clock.tick(FPS)
        mouse_pos = pygame.mouse.get_pos()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                leave()
                running = False
            elif event.type == pygame.KEYDOWN:
                if state == "menu":
                    if event.key in (pygame.K_UP, pygame.K_w):
                        selected_menu = (selected_menu - 1) % len(MENU_OPTIONS)
                    elif event.key in (pygame.K_DOWN, pygame.K_s):
                        selected_menu = (selected_menu + 1) % len(MENU_OPTIONS)
                    elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
                        choose(selected_menu)
                    elif event.key == pygame.K_ESCAPE:
                        running = False
                elif state == "highscore":
                    if event.key in (pygame.K_BACKSPACE, pygame.K_ESCAPE):
                        state = "menu"
                elif event.key == pygame.K_ESCAPE:
                    if state == "play":
                        leave()
                    state = "menu"
                elif state == "play":
                    if event.key == pygame.K_r:
                        leave()
                        start()
                    elif event.key == pygame.K_u:
                        if game.undo():
                            hint = None
                    elif event.key == pygame.K_h:
                        hint = game.find_hint() or hint
                elif state == "2048":
                    if event.key == pygame.K_r:
                        start_2048()
                    elif event.key == pygame.K_c:
                        tiles.keep_playing()
                    elif event.key in KEY_DIRECTIONS:
                        if tiles.move(KEY_DIRECTIONS[event.key]) and snd_place:
                            snd_place.play()
                elif state == "mines":
                    if event.key == pygame.K_r:
                        start_mines()
                    elif event.key in DIFFICULTY_KEYS:
                        start_mines(DIFFICULTY_KEYS[event.key])
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if state == "menu" and event.button == 1:
                    mx, my = event.pos
                    for i, text in enumerate(MENU_OPTIONS):
                        txt = fonts[1].render(text, True, TEXT)
                        rect = pygame.Rect((SCREEN_W - txt.get_width()) // 2, 220 + i * 86,
                                           txt.get_width(), txt.get_height())
                        if rect.collidepoint(mx, my):
                            choose(i)
                            break
                elif state == "play" and event.button == 1 and not game.is_over:
                    drag = tray_hit(game.snapshot().pool, *event.pos)
                elif state == "mines" and event.button in (1, 3):
                    cell = mine_cell_at(mines, *event.pos)
                    if cell is not None:
                        if event.button == 1:
                            mines.reveal(*cell)
                        else:
                            mines.toggle_flag(*cell)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                if state == "play" and drag is not None:
                    anchor = drop_anchor(drag, *event.pos)
                    before = game.score
                    if anchor is not None and game.try_place(drag.index, *anchor):
                        hint = None
                        if game.score > before:
                            if snd_clear: snd_clear.play()
                        elif snd_place:
                            snd_place.play()
                    drag = None

        screen.fill(BG)
        if state == "menu":
            draw_menu(screen, fonts, selected_menu)
        elif state == "highscore":
            draw_highscore_screen(screen, fonts, store)
        elif state == "2048":
            draw_2048(screen, fonts, tiles)
        elif state == "mines":
            draw_minesweeper(screen, fonts, mines)
        elif state == "play":
            snap = game.snapshot()
            draw_hud(screen, fonts, snap)
            draw_board(screen, snap)
            draw_tray(screen, snap, drag)
            if hint is not None:
                draw_hint(screen, snap, hint)
            if drag is not None:
                draw_ghost(screen, game, snap, drag, mouse_pos)
            if snap.is_over:
                draw_banner(screen, fonts, "GAME OVER",
                            "No piece fits anywhere. Press R to restart or Esc for the menu.",
                            TRAY_Y - 14)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
