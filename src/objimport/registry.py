"""
Group and material bookkeeping for a parse run.

The active group lives on the ParseState passed in, so every function here
works on exactly the state it is handed:

    no active group --g name--------------> active(name)
    no active group --f / usemtl----------> active("Root"), then mutate
    active(name)    --g other-------------> active(other)
    active(name)    --f / usemtl / mtllib-> active(name), mutated
"""

from dataclasses import dataclass, field

from objimport.config import DEFAULT_GROUP_NAME, DEFAULT_MATERIAL
from objimport.mesh import Face, Group


@dataclass
class GroupBuilder:
    name: str
    material: str = DEFAULT_MATERIAL
    faces: list[Face] = field(default_factory=list)

    def freeze(self) -> Group:
        return Group(name=self.name, material=self.material, faces=tuple(self.faces))


def select_group(state, name: str) -> GroupBuilder:
    """
    Make `name` the active group. Unseen names are created with the default
    material; known names are reactivated with their material and faces intact.
    """
    group = state.groups.get(name)
    if group is None:
        group = GroupBuilder(name=name)
        state.groups[name] = group
    state.active_group = name
    return group


def current_group(state) -> GroupBuilder:
    """Return the active group, creating the default one if none is active."""
    if state.active_group is None:
        return select_group(state, DEFAULT_GROUP_NAME)
    return state.groups[state.active_group]


def assign_material(state, material: str) -> GroupBuilder:
    # Last usemtl wins; groups hold a single material.
    if state.active_group is None:
        group = select_group(state, DEFAULT_GROUP_NAME)
    else:
        group = state.groups[state.active_group]
    group.material = material
    return group


def add_material_library(state, filename: str) -> None:
    state.material_libraries.append(filename)
