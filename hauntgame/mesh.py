"""Geometry for the ground field and the cylindrical boundary wall."""

from __future__ import annotations

import math
from dataclasses import dataclass

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
Color = tuple[float, float, float, float]

FIELD_HALF_X = 1850.0
FIELD_HALF_Z = 850.0
FIELD_X_MESH = 4
FIELD_Z_MESH = 4
FIELD_HEIGHT = 1.0

WALL_HEIGHT = 250.0
WALL_V_MESH = 30
WALL_H_MESH = 30
WALL_RADIUS = 1000

_INDEX_MASK = 0xFFFF


@dataclass(frozen=True)
class Vertex:
    """One mesh vertex: position, normal, RGBA colour and texture coordinate."""

    pos: Vec3
    nor: Vec3
    col: Color
    tex: Vec2


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _normalize(v: Vec3) -> Vec3:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if length == 0.0:
        return (0.0, 0.0, 0.0)
    return (v[0] / length, v[1] / length, v[2] / length)


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _require_positive(**values: int) -> None:
    for name, value in values.items():
        if value < 1:
            raise ValueError(f"{name} must be at least 1, got {value}")


def field_vertices(
    x_mesh: int = FIELD_X_MESH,
    z_mesh: int = FIELD_Z_MESH,
    half_x: float = FIELD_HALF_X,
    half_z: float = FIELD_HALF_Z,
) -> list[Vertex]:
    """Vertices of a flat grid, row by row from +z to -z and -x to +x."""
    _require_positive(x_mesh=x_mesh, z_mesh=z_mesh)
    step_x = (half_x * 2) / x_mesh
    step_z = (half_z * 2) / z_mesh
    return [
        Vertex(
            pos=(step_x * x - half_x, FIELD_HEIGHT, -step_z * z + half_z),
            nor=(0.0, 1.0, 0.0),
            col=(1.0, 1.0, 1.0, 1.0),
            tex=((1.0 / x_mesh) * x, (1.0 / z_mesh) * z),
        )
        for z in range(z_mesh + 1)
        for x in range(x_mesh + 1)
    ]


def strip_index_count(columns: int, rows: int) -> int:
    """Size of the index buffer allotted to a triangle-strip grid."""
    return (columns + 1) * 2 * rows + (rows - 1) * 4


def strip_indices(columns: int, count: int) -> list[int]:
    """Triangle-strip indices for a grid with ``columns`` cells per row.

    Each row is emitted as alternating lower/upper vertex pairs, and rows are
    joined by repeating vertices to form degenerate triangles.  Values are
    16-bit, as stored in the index buffer.
    """
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    row_length = 2 * (columns + 1)
    indices: list[int] = []
    steps: list[int] = []
    a = 2 * columns + 3
    b = -columns - 1
    phase = 0
    for n in range(count):
        if n == 0:
            index = columns + 1
        else:
            a, b = -a, b + a
            if phase == row_length:
                index = indices[-1]
            elif phase == row_length + 1:
                index = indices[-2] + steps[-2]
            elif phase == row_length + 2:
                phase = 0
                index = indices[-1]
            else:
                index = indices[-1] + steps[-1]
        indices.append(index & _INDEX_MASK)
        steps.append(b)
        phase += 1
    return indices


def _ring_point(n: int, h_mesh: int, radius: float, y: float) -> Vec3:
    angle = (math.pi * 2) / h_mesh * -n + math.pi
    return (math.sin(-angle) * radius, y, math.cos(-angle) * radius)


def wall_vertices(
    v_mesh: int = WALL_V_MESH,
    h_mesh: int = WALL_H_MESH,
    radius: float = WALL_RADIUS,
    height: float = WALL_HEIGHT,
) -> list[Vertex]:
    """Vertices of a cylinder wall, rings from the top down."""
    _require_positive(v_mesh=v_mesh, h_mesh=h_mesh)
    vertices = []
    for v in range(v_mesh + 1):
        y = height - (height / v_mesh) * v
        for h in range(h_mesh + 1):
            pos = _ring_point(h, h_mesh, radius, y)
            vertices.append(
                Vertex(
                    pos=pos,
                    nor=_normalize(pos),
                    col=(1.0, 0.5, 0.5, 0.5),
                    tex=((1.0 / v_mesh) * h, (1.0 / h_mesh) * h),
                )
            )
    return vertices


def collide_cylinder(
    position: Vec3,
    previous: Vec3,
    radius: float = WALL_RADIUS,
    height: float = WALL_HEIGHT,
    v_mesh: int = WALL_V_MESH,
    h_mesh: int = WALL_H_MESH,
) -> Vec3:
    """Keep a point inside the cylinder wall.

    For every edge of the wall's outline, a point on the outer side has its
    x and z restored from ``previous``; y is kept.  Returns the new position.
    """
    _require_positive(v_mesh=v_mesh, h_mesh=h_mesh)
    outline = [
        _ring_point(n, h_mesh, radius, height - (height / v_mesh) * n)
        for n in range(v_mesh)
    ]
    x, y, z = position
    for n in range(v_mesh):
        start = outline[n % v_mesh]
        end = outline[(n + 1) % v_mesh]
        edge = _normalize(_sub(end, start))
        to_point = _normalize(_sub((x, y, z), outline[n]))
        normal = _normalize(_cross(edge, to_point))
        if normal[1] < 0.0:
            x = previous[0]
            z = previous[2]
    return (x, y, z)