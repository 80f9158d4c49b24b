import pytest

from bravoengine.components import GameObject
from bravoengine.geometry import Color, Rect, Transform, Vector2
from bravoengine.sprite import Animation, Sprite

TEXTURE = object()
SPRITE_WIDTH = 16
SPRITE_HEIGHT = 25


def make_frames():
    base = [
        Sprite(TEXTURE, SPRITE_WIDTH, SPRITE_HEIGHT, Rect(21 + i * SPRITE_WIDTH, 95, SPRITE_WIDTH, SPRITE_HEIGHT))
        for i in range(3)
    ]
    return [base[0], base[1], base[2], base[1].clone()]


@pytest.fixture
def animation():
    return Animation(make_frames(), 200, True)


def test_sprite_defaults():
    sprite = Sprite(TEXTURE, 16, 25, Rect(1, 2, 16, 25))
    assert sprite.width == 16
    assert sprite.height == 25
    assert sprite.source == Rect(1, 2, 16, 25)
    assert sprite.layer == 0
    assert sprite.color_filter == Color(255, 255, 255, 255)
    assert sprite.flip_x is False and sprite.flip_y is False
    assert sprite.relative_position == Transform()
    assert sprite.tag == "defaultSprite"


def test_sprite_clone_shares_texture_only():
    sprite = Sprite(TEXTURE, 16, 25, Rect(1, 2, 16, 25))
    sprite.flip_x = True
    duplicate = sprite.clone()
    assert duplicate.texture is TEXTURE
    assert duplicate.source == sprite.source
    assert duplicate.flip_x is True
    duplicate.source.x = 99
    duplicate.relative_position.translate(Vector2(3, 3))
    assert sprite.source.x == 1
    assert sprite.relative_position.position == Vector2(0, 0)


def test_constructor_initializes_correctly(animation):
    assert animation.time_between_frames == 200
    assert animation.is_looping is True
    assert animation.frame_count == 4
    assert animation.tag == "defaultAnimation"
    animation.is_looping = False
    assert animation.is_looping is False


def test_clone_creates_deep_copy(animation):
    cloned = animation.clone()
    assert cloned.time_between_frames == animation.time_between_frames
    assert cloned.is_looping == animation.is_looping
    assert cloned.frame_count == animation.frame_count
    assert cloned.get_frame(0) is not animation.get_frame(0)
    assert cloned.get_frame(0).source == animation.get_frame(0).source


def test_set_flip_x_and_flip_y(animation):
    animation.flip_x = True
    animation.flip_y = True
    assert animation.flip_x and animation.flip_y
    frame = animation.current_frame(0.0)
    assert frame.flip_x is True
    assert frame.flip_y is True


def test_set_and_get_color_filter(animation):
    animation.color_filter = Color(128, 64, 64, 255)
    color = animation.color_filter
    assert (color.r, color.g, color.b, color.a) == (128, 64, 64, 255)
    assert all(animation.get_frame(i).color_filter == Color(128, 64, 64, 255) for i in range(4))


def test_color_filter_without_frames_is_white():
    assert Animation([], 100, False).color_filter == Color(255, 255, 255, 255)


def test_world_transform_adds_parent_transform(animation):
    game_object = GameObject()
    game_object.transform = Transform(Vector2(10, 20))
    game_object.add_component(animation)
    animation.transform = Transform(Vector2(5, 5))
    result = animation.world_transform()
    assert result.position.x == 15
    assert result.position.y == 25


def test_world_transform_without_parent_raises(animation):
    with pytest.raises(RuntimeError):
        animation.world_transform()


def test_set_time_between_frames(animation):
    animation.time_between_frames = 300
    assert animation.time_between_frames == 300


def test_set_and_get_layer(animation):
    animation.layer = 3
    assert animation.layer == 3


@pytest.mark.parametrize("index", [4, 10, -1])
def test_get_frame_out_of_range(animation, index):
    with pytest.raises(IndexError):
        animation.get_frame(index)


@pytest.mark.parametrize(("ticks", "index"), [(0.0, 0), (0.25, 1), (0.65, 3), (0.85, 0), (1.0, 1)])
def test_current_frame_cycles(ticks, index):
    frames = make_frames()
    animation = Animation(frames, 200, True)
    assert animation.current_frame(ticks) is frames[index]


def test_current_frame_without_frames_raises():
    with pytest.raises(IndexError):
        Animation([], 100, True).current_frame(0.5)