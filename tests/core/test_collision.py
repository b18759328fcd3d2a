"""
Unit tests for the collision world

Tests wall bounces, paddle hits, penetration handling and the open right side.
"""

import pytest

from squash_pong.core.collision import CollisionWorld
from squash_pong.core.entities import Arena
from squash_pong.core.entities import Ball
from squash_pong.core.entities import BodyCategory
from squash_pong.core.entities import Paddle
from squash_pong.core.entities import WallSide
from squash_pong.core.entities import create_walls
from squash_pong.core.geometry import Axis


def make_world(ball: Ball, paddle_y: float = 600.0) -> CollisionWorld:
    arena = Arena(800.0, 1200.0)
    paddle = Paddle(760.0, paddle_y, width=20.0, height=150.0, max_y=1050.0)
    return CollisionWorld(create_walls(arena, 20.0), ball, paddle)


class TestWallContacts:
    """Test ball bounces on the three walls"""

    def test_left_wall(self):
        """Vertical wall reflects X"""
        ball = Ball(35.0, 600.0, -500.0, 200.0, radius=20.0)
        contacts = make_world(ball).step()

        assert len(contacts) == 1
        assert contacts[0].category is BodyCategory.WALL
        assert contacts[0].side is WallSide.LEFT
        assert contacts[0].axis is Axis.X
        assert ball.velocity.to_tuple() == (500.0, 200.0)
        assert ball.position.x == 40.0, "Ball should be pushed back to the wall boundary"

    def test_top_wall(self):
        """Horizontal wall reflects Y"""
        ball = Ball(400.0, 1165.0, 100.0, 500.0, radius=20.0)
        contacts = make_world(ball).step()

        assert [c.side for c in contacts] == [WallSide.TOP]
        assert ball.velocity.to_tuple() == (100.0, -500.0)
        assert ball.position.y == 1160.0

    def test_bottom_wall(self):
        ball = Ball(400.0, 30.0, 100.0, -500.0, radius=20.0)
        contacts = make_world(ball).step()

        assert [c.side for c in contacts] == [WallSide.BOTTOM]
        assert ball.velocity.to_tuple() == (100.0, 500.0)
        assert ball.position.y == 40.0

    def test_corner_resolves_walls_in_order(self):
        """Left then bottom, both components reflected"""
        ball = Ball(35.0, 35.0, -500.0, -500.0, radius=20.0)
        contacts = make_world(ball).step()

        assert [c.side for c in contacts] == [WallSide.LEFT, WallSide.BOTTOM]
        assert ball.velocity.to_tuple() == (500.0, 500.0)

    def test_overlap_while_moving_away_is_not_a_contact(self):
        """Penetration is resolved but the ball keeps its outgoing velocity"""
        ball = Ball(35.0, 600.0, 500.0, 0.0, radius=20.0)
        contacts = make_world(ball).step()

        assert contacts == []
        assert ball.velocity.to_tuple() == (500.0, 0.0)
        assert ball.position.x == 40.0

    def test_no_contact_in_open_field(self):
        ball = Ball(400.0, 600.0, 500.0, 500.0, radius=20.0)
        assert make_world(ball).step() == []

    def test_no_right_wall(self):
        """Ball beyond the right edge never bounces back"""
        ball = Ball(810.0, 300.0, 500.0, 0.0, radius=20.0)
        contacts = make_world(ball).step()

        assert contacts == []
        assert ball.velocity.x == 500.0


class TestPaddleContacts:
    """Test ball hitting the paddle"""

    def test_paddle_hit(self):
        """X velocity flips, Y velocity unchanged"""
        ball = Ball(745.0, 650.0, 500.0, 300.0, radius=20.0)
        contacts = make_world(ball).step()

        assert len(contacts) == 1
        assert contacts[0].is_paddle_hit
        assert contacts[0].axis is Axis.X
        assert contacts[0].side is None
        assert ball.velocity.to_tuple() == (-500.0, 300.0)
        assert ball.position.x == 740.0

    def test_paddle_hit_at_arena_bottom(self):
        """Paddle resting at y=0 still bounces the ball"""
        ball = Ball(745.0, 60.0, 500.0, 0.0, radius=20.0)
        contacts = make_world(ball, paddle_y=0.0).step()

        assert [c.category for c in contacts] == [BodyCategory.PADDLE]
        assert ball.velocity.to_tuple() == (-500.0, 0.0)

    def test_single_hit_per_contact(self):
        """A ball still overlapping after the bounce is not hit again"""
        ball = Ball(745.0, 650.0, 500.0, 0.0, radius=20.0)
        world = make_world(ball)

        first = world.step()
        # Force overlap again while the ball is moving away
        ball.position.x = 750.0
        second = world.step()

        assert sum(c.is_paddle_hit for c in first) == 1
        assert second == []
        assert ball.velocity.x == -500.0

    def test_ball_behind_paddle_leaves_through_back(self):
        """Overlap past the back face pushes the ball out to the right, no bounce"""
        ball = Ball(795.0, 650.0, 100.0, 0.0, radius=20.0)
        contacts = make_world(ball).step()

        assert contacts == []
        assert ball.position.x == 800.0
        assert ball.velocity.to_tuple() == (100.0, 0.0)

    def test_top_edge_hit(self):
        """Ball falling onto the paddle top is pushed up and reflects Y"""
        ball = Ball(770.0, 765.0, 0.0, -300.0, radius=20.0)
        contacts = make_world(ball).step()

        assert len(contacts) == 1
        assert contacts[0].is_paddle_hit
        assert contacts[0].axis is Axis.Y
        assert ball.position.to_tuple() == (770.0, 770.0)
        assert ball.velocity.to_tuple() == (0.0, 300.0)

    def test_bottom_edge_overlap_moving_away(self):
        """Paddle sliding onto a ball moving away pushes it out without a hit"""
        ball = Ball(770.0, 590.0, -500.0, -100.0, radius=20.0)
        contacts = make_world(ball).step()

        assert contacts == []
        assert ball.position.to_tuple() == (770.0, 580.0)
        assert ball.velocity.to_tuple() == (-500.0, -100.0)

    def test_front_overlap_moving_away_is_pushed_out(self):
        ball = Ball(750.0, 650.0, -500.0, 0.0, radius=20.0)
        contacts = make_world(ball).step()

        assert contacts == []
        assert ball.position.x == 740.0

    def test_ball_missing_paddle(self):
        ball = Ball(745.0, 300.0, 500.0, 0.0, radius=20.0)
        assert make_world(ball, paddle_y=600.0).step() == []

    def test_walls_resolved_before_paddle(self):
        """Top wall and paddle in the same step"""
        ball = Ball(745.0, 1165.0, 500.0, 500.0, radius=20.0)
        contacts = make_world(ball, paddle_y=1050.0).step()

        assert [c.category for c in contacts] == [BodyCategory.WALL, BodyCategory.PADDLE]
        assert ball.velocity.to_tuple() == (-500.0, -500.0)


class TestElasticity:
    """Post-contact speed equals pre-contact speed"""

    @pytest.mark.parametrize(
        "x,y,vx,vy",
        [
            (35.0, 600.0, -500.0, 500.0),
            (400.0, 1165.0, -500.0, 500.0),
            (400.0, 30.0, 250.0, -700.0),
            (745.0, 650.0, 500.0, 500.0),
            (35.0, 35.0, -500.0, -500.0),
        ],
    )
    def test_speed_preserved(self, x, y, vx, vy):
        ball = Ball(x, y, vx, vy, radius=20.0)
        speed = ball.velocity.magnitude()

        contacts = make_world(ball).step()

        assert contacts, "Scenario should produce a contact"
        assert ball.velocity.magnitude() == pytest.approx(speed)
