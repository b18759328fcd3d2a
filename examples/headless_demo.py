"""
Headless Squash Pong: a simulated clock and a simple tracking player
"""

import argparse

from squash_pong.core.driver import FrameDriver
from squash_pong.core.game import ScoreChanged
from squash_pong.core.game import StateChanged


def follow_ball(driver: FrameDriver) -> None:
    """Press above or below the middle to move the paddle toward the ball"""
    game = driver.game
    paddle_center = game.paddle.position.y + game.paddle.height / 2
    gap = game.ball.position.y - paddle_center
    if abs(gap) < game.paddle.height / 4:
        driver.on_input_end()
    elif gap > 0:
        driver.on_input_start(game.arena.height)
    else:
        driver.on_input_start(0.0)


def main() -> None:
    parser = argparse.ArgumentParser(description="Headless Squash Pong demo")
    parser.add_argument("--seconds", type=float, default=60.0, help="Simulated duration")
    parser.add_argument("--fps", type=int, default=60, help="Simulated frame rate")
    args = parser.parse_args()

    driver = FrameDriver()
    frames = int(args.seconds * args.fps)

    for frame in range(frames):
        now = frame / args.fps
        follow_ball(driver)
        for event in driver.on_frame(now):
            if isinstance(event, ScoreChanged):
                print(f"[{now:7.2f}s] score {event.score}")
            elif isinstance(event, StateChanged):
                print(f"[{now:7.2f}s] {event.status.value}")

    print(f"Games started: {driver.game.games_played}, current score: {driver.game.score}")


if __name__ == "__main__":
    main()
