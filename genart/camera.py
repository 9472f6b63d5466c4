"""A perspective camera orbiting a target, with the matrices that project it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np

from genart.interaction import Key

# Maps OpenGL clip depth (-1..1) onto the 0..1 depth range.
OPENGL_TO_WGPU_MATRIX = np.array(
    [
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 0.5, 0.5],
        [0.0, 0.0, 0.0, 1.0],
    ]
)

_FORWARD_KEYS = (Key.W, Key.UP)
_BACKWARD_KEYS = (Key.S, Key.DOWN)


def _vector(values: Sequence[float]) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a three-component vector, got shape {array.shape}")
    return array.copy()


def _normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0 or not math.isfinite(length):
        raise ValueError("cannot normalize a zero-length or non-finite vector")
    return v / length


def look_at_rh(eye: Sequence[float], target: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``target``."""
    eye_v, target_v, up_v = _vector(eye), _vector(target), _vector(up)
    f = _normalize(target_v - eye_v)
    s = _normalize(np.cross(f, up_v))
    u = np.cross(s, f)
    return np.array(
        [
            [s[0], s[1], s[2], -eye_v.dot(s)],
            [u[0], u[1], u[2], -eye_v.dot(u)],
            [-f[0], -f[1], -f[2], eye_v.dot(f)],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def perspective(fovy_degrees: float, aspect: float, znear: float, zfar: float) -> np.ndarray:
    """Perspective projection onto OpenGL clip space (depth -1 at near, 1 at far)."""
    fovy = math.radians(fovy_degrees)
    if not 0.0 < fovy < math.pi:
        raise ValueError("the vertical field of view must lie strictly between 0 and 180 degrees")
    if math.isclose(abs(aspect), 0.0, abs_tol=1e-12):
        raise ValueError("the aspect ratio must be non-zero")
    if not znear > 0.0:
        raise ValueError("the near plane must be positive")
    if not zfar > 0.0:
        raise ValueError("the far plane must be positive")
    if math.isclose(zfar, znear, rel_tol=0.0, abs_tol=1e-12):
        raise ValueError("the near and far planes must differ")
    f = 1.0 / math.tan(fovy / 2.0)
    return np.array(
        [
            [f / aspect, 0.0, 0.0, 0.0],
            [0.0, f, 0.0, 0.0],
            [0.0, 0.0, (zfar + znear) / (znear - zfar), 2.0 * zfar * znear / (znear - zfar)],
            [0.0, 0.0, -1.0, 0.0],
        ]
    )


def rotation_z(degrees: float) -> np.ndarray:
    """Rotation about the z axis, counter-clockwise for positive angles."""
    angle = math.radians(degrees)
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


@dataclass(eq=False)
class Camera:
    """Eye, target and lens of a perspective camera."""

    eye: np.ndarray
    target: np.ndarray
    up: np.ndarray
    aspect: float
    fovy: float
    znear: float
    zfar: float

    def __post_init__(self) -> None:
        self.eye = _vector(self.eye)
        self.target = _vector(self.target)
        self.up = _vector(self.up)

    def build_view_projection_matrix(self) -> np.ndarray:
        view = look_at_rh(self.eye, self.target, self.up)
        proj = perspective(self.fovy, self.aspect, self.znear, self.zfar)
        return proj @ view


@dataclass(eq=False)
class CameraUniform:
    """The view-projection matrix as handed to a shader."""

    view_proj: np.ndarray = field(default_factory=lambda: np.identity(4))

    def update_view_proj(self, camera: Camera) -> None:
        self.view_proj = camera.build_view_projection_matrix()

    @property
    def columns(self) -> List[List[float]]:
        """The matrix as four columns, the layout a uniform buffer expects."""
        return self.view_proj.T.tolist()


class CameraStaging:
    """A camera together with the rotation applied to the model it looks at."""

    def __init__(self, camera: Camera) -> None:
        self.camera = camera
        self.model_rotation = 0.0

    def update_camera(self, camera_uniform: CameraUniform) -> None:
        camera_uniform.view_proj = (
            OPENGL_TO_WGPU_MATRIX
            @ self.camera.build_view_projection_matrix()
            @ rotation_z(self.model_rotation)
        )

    def update_rotation(self, degrees: float) -> None:
        self.model_rotation += degrees


@dataclass
class CameraController:
    """Moves a camera towards, away from and around its target from held keys."""

    speed: float
    is_forward_pressed: bool = False
    is_backward_pressed: bool = False
    is_left_pressed: bool = False
    is_right_pressed: bool = False

    def process_key(self, key: Key, pressed: bool) -> bool:
        """Record a key going down or up; return whether the key was used."""
        if key in _FORWARD_KEYS:
            self.is_forward_pressed = pressed
        elif key is Key.A:
            self.is_left_pressed = pressed
        elif key in _BACKWARD_KEYS:
            self.is_backward_pressed = pressed
        elif key is Key.D:
            self.is_right_pressed = pressed
        else:
            return False
        return True

    def update_camera(self, camera: Camera) -> None:
        forward = camera.target - camera.eye
        forward_norm = _normalize(forward)
        forward_mag = float(np.linalg.norm(forward))

        # Stop short of the target so the camera never passes through it.
        if self.is_forward_pressed and forward_mag > self.speed:
            camera.eye = camera.eye + forward_norm * self.speed
        if self.is_backward_pressed:
            camera.eye = camera.eye - forward_norm * self.speed

        right = np.cross(forward_norm, camera.up)

        forward = camera.target - camera.eye
        forward_mag = float(np.linalg.norm(forward))

        # Rescaling keeps the eye on the circle around the target.
        if self.is_right_pressed:
            camera.eye = camera.target - _normalize(forward + right * self.speed) * forward_mag
        if self.is_left_pressed:
            camera.eye = camera.target - _normalize(forward - right * self.speed) * forward_mag