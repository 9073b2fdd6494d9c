"""Centroid of selected objects, with vertex gathering left to subclasses."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __truediv__(self, divisor: float) -> Vector3:
        """Divide every component; dividing by zero gives the zero vector."""
        if not divisor:
            return Vector3()
        return Vector3(self.x / divisor, self.y / divisor, self.z / divisor)

    def __lt__(self, other: Vector3) -> bool:
        """True when every component is smaller."""
        return self.x < other.x and self.y < other.y and self.z < other.z

    def __str__(self) -> str:
        return f"({self.x:g};{self.y:g};{self.z:g})"


class Mesh:
    def __init__(self) -> None:
        self.coords: list[Vector3] = []

    def add_coords(self, coords: Iterable[Vector3]) -> None:
        self.coords.extend(coords)


class MeshObject:
    """An object made of named meshes."""

    def __init__(self) -> None:
        self.meshes: dict[str, Mesh] = {}

    def add_mesh(self, name: str, mesh: Mesh) -> None:
        self.meshes[name] = mesh


def _ordered_unique(vertices: Iterable[Vector3]) -> list[Vector3]:
    """Keep vertices in component-wise order, dropping ones equivalent to a kept one."""
    kept: list[Vector3] = []
    for vertex in vertices:
        lo, hi = 0, len(kept)
        while lo < hi:
            mid = (lo + hi) // 2
            if kept[mid] < vertex:
                lo = mid + 1
            else:
                hi = mid
        if lo < len(kept) and not vertex < kept[lo]:
            continue
        kept.insert(lo, vertex)
    return kept


class Selection(ABC):
    """A named set of selected objects."""

    def __init__(self) -> None:
        self.selected_objects: dict[str, MeshObject] = {}

    def add_selected_object(self, name: str, obj: MeshObject) -> None:
        self.selected_objects[name] = obj

    def has_selected_objects(self) -> bool:
        return bool(self.selected_objects)

    @abstractmethod
    def _vertices_for_centroid(self) -> list[Vector3]:
        """Vertices the centroid is computed from."""

    def centroid(self) -> Vector3:
        if not self.has_selected_objects():
            return Vector3()
        vertices = _ordered_unique(self._vertices_for_centroid())
        if not vertices:
            return Vector3()
        if len(vertices) == 1:
            return vertices[0]
        total = vertices[0]
        for vertex in vertices[1:]:
            total = total + vertex
        return total / float(len(vertices))


class SelectionObject(Selection):
    """Uses every vertex of every mesh of the selected objects."""

    def _vertices_for_centroid(self) -> list[Vector3]:
        return [
            vertex
            for _, obj in sorted(self.selected_objects.items())
            for _, mesh in sorted(obj.meshes.items())
            for vertex in mesh.coords
        ]


def run() -> None:
    mesh_01 = Mesh()
    mesh_02 = Mesh()
    mesh_01.add_coords([
        Vector3(1.0, 0.0, 1.0),
        Vector3(2.0, 0.3, 10.0),
        Vector3(1.0, 0.6, 5.0),
    ])
    mesh_02.add_coords([
        Vector3(1.0, 0.6, 5.0),
        Vector3(0.1, 6.0, 0.5),
        Vector3(0.2, 0.3, 0.9),
    ])

    object_01 = MeshObject()
    object_01.add_mesh("mesh_01", mesh_01)
    object_01.add_mesh("mesh_02", mesh_02)

    selection: Selection = SelectionObject()
    selection.add_selected_object("object_01", object_01)

    print(f"Centroid of selected objects: {selection.centroid()}")