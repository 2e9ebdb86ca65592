import logging
import sys

import pygame

from pong.config import FPS, HEIGHT, TITLE, WIDTH
from pong.game import GameState

logger = logging.getLogger(__name__)


def run():
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 18)

    game = GameState(screen.get_size())
    logger.info("starting %s at %dx%d", TITLE, *screen.get_size())

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.info("window closed at %d - %d", game.p1_score, game.p2_score)
                return

        keys = pygame.key.get_pressed()

        # global quit
        if keys[pygame.K_ESCAPE]:
            logger.info("quit at %d - %d", game.p1_score, game.p2_score)
            return

        delta = clock.tick(FPS) / 1000.0
        game.update(delta, keys)

        game.render(screen, font)
        pygame.display.flip()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        run()
    except pygame.error:
        logger.exception("platform failure")
        raise
    finally:
        pygame.quit()
    sys.exit(0)


if __name__ == "__main__":
    main()
