# birdcraft/geometry/bird.py
"""
BIRD GENERATOR: Parametric Head and Body Meshes
===============================================

PURPOSE:
--------
Turn a BirdParams vector into two triangle meshes: the head (with beak and
eyes) and the body (neck, chest, bottom and tail). The two parts are never
unioned with each other; the head/body boolean proved unstable, so each part
is built and exported on its own.

HEAD:
-----
1. Skull sphere, plus a short "beak skeleton" cone out along -X
2. Hull of skull + beak skeleton, squashed in Y and Z by beak_size
   (the hull IS the beak)
3. Two flattened eye spheres, the second a mirror image of the first
4. Pitch/yaw, move to the head position, scale up slightly, subdivide once

BODY (chained hull):
-------------------
    neck ──hull── chest ──hull── bottom ──hull── tail

Each landmark is hulled onto the running body in turn rather than hulling
all of them at once, so the silhouette follows the landmark path instead of
ballooning into one round blob.

BASE CUT:
---------
Optionally slice a flat base off the body for 3D printing stability by
subtracting a large box whose top face sits at
belly_size * (-1.5 + base_flat / 200). base_flat = -100 disables the cut.
"""

import logging
from dataclasses import dataclass

import trimesh

from ..config import CONFIG
from ..params import BirdParams
from .csg import (
    box, difference, frustum, hull, mirror, renormalize, rotate, scale,
    sphere, subdivide, translate, union,
)

logger = logging.getLogger(__name__)


@dataclass
class BirdMeshes:
    """The two independent parts of a generated bird."""
    head: trimesh.Trimesh
    body: trimesh.Trimesh


def _skeleton_cone(radius: float) -> trimesh.Trimesh:
    """Short cone tapering from `radius` to the epsilon radius."""
    eps = CONFIG.epsilon_radius
    return frustum(radius if radius > 0 else eps, eps, CONFIG.taper_height)


def _eye(params: BirdParams) -> trimesh.Trimesh:
    divisor = CONFIG.eye_resolution_divisor
    eye = sphere(
        params.eye_size / 2,
        CONFIG.sphere_segments // divisor,
        CONFIG.sphere_stacks // divisor,
    )
    eye = scale(eye, 1.0, 1.0, CONFIG.eye_flatten)
    eye = translate(eye, 0.0, 0.0, params.head_size / 2 - params.eye_size / 8)
    return rotate(eye, *CONFIG.eye_rotation_deg)


def build_head(params: BirdParams) -> trimesh.Trimesh:
    """Build the head mesh (skull, beak and eyes), positioned on the body."""
    logger.debug("Building skull")
    skull = sphere(params.head_size / 2)

    beak = _skeleton_cone(params.beak_width)
    beak = scale(beak, params.beak_roundness / 100, 1.0, 1.0)
    beak = translate(beak, -(params.beak_length + params.head_size / 2), 0.0, 0.0)
    beak = rotate(beak, 0.0, CONFIG.beak_tilt_deg, 0.0)
    head = renormalize(union(skull, beak))

    # the head is the beak now
    head = hull(head)
    head = scale(head, 1.0, params.beak_size / 100, params.beak_size / 100)

    if params.eye_size > 0:
        logger.debug("Adding eyes")
        eye = _eye(params)
        for part in (eye, mirror(eye, [0.0, 1.0, 0.0])):
            head = renormalize(union(head, part))

    head = rotate(head, 0.0, params.head_pitch, params.head_yaw)
    head = translate(head, 0.0, params.head_lateral_offset, params.head_level)
    head = scale(head, CONFIG.head_scale, CONFIG.head_scale, CONFIG.head_scale)
    head = subdivide(renormalize(head))
    logger.debug("Head done: %d faces", len(head.faces))
    return head


def body_envelope(params: BirdParams) -> trimesh.Trimesh:
    """Chained hull of neck, chest, bottom and tail, before any base cut."""
    neck = sphere(params.head_size / 2)
    neck = translate(neck, 0.0, params.head_lateral_offset, params.head_level)

    chest = sphere(params.belly_size / 2)
    belly_size = params.belly_size if params.belly_size > 0 else CONFIG.epsilon_radius
    chest = scale(chest, params.belly_length / belly_size, params.belly_fat / 100, 1.0)
    chest = translate(chest, params.head_to_belly, 0.0, 0.0)
    body = hull(neck, chest)

    anchor = params.head_to_belly + params.belly_to_bottom
    bottom = translate(sphere(params.bottom_size / 2), anchor, 0.0, 0.0)
    body = hull(body, bottom)

    tail = _skeleton_cone(params.tail_width)
    tail = scale(tail, params.tail_roundness / 100, 1.0, 1.0)
    tail = translate(tail, params.tail_length, 0.0, 0.0)
    tail = rotate(tail, 0.0, -params.tail_pitch, params.tail_yaw)
    tail = translate(tail, anchor, 0.0, 0.0)
    body = hull(body, tail)

    return renormalize(body)


def cut_height(params: BirdParams) -> float:
    """Z of the flat base for the current base_flat setting."""
    return params.belly_size * (-1.5 + params.base_flat / 200)


def flatten_base(body: trimesh.Trimesh, params: BirdParams) -> trimesh.Trimesh:
    """
    Slice a flat base off the body.

    Returns `body` untouched when base_flat is at the disabled sentinel, or
    when the cut would leave nothing.
    """
    if params.base_flat <= CONFIG.base_flat_disabled:
        return body

    total_len = (
        params.beak_length + params.head_to_belly
        + params.belly_to_bottom + params.tail_length
    )
    size = CONFIG.cutter_scale * max(total_len, float(body.extents.max()))
    z_cut = cut_height(params)
    cutter = translate(box([size, size, size]), 0.0, 0.0, z_cut - size / 2)

    cut = difference(body, cutter)
    if len(cut.faces) == 0:
        logger.warning("Base cut at z=%.2f removes the whole body; skipping cut", z_cut)
        return body
    return renormalize(cut)


def build_body(params: BirdParams) -> trimesh.Trimesh:
    """Build the body mesh, including the optional flat base."""
    body = body_envelope(params)
    body = flatten_base(body, params)
    logger.debug("Body done: %d faces", len(body.faces))
    return body


def build_bird(params: BirdParams) -> BirdMeshes:
    """Build both parts of a bird."""
    logger.debug("Start that bird")
    return BirdMeshes(head=build_head(params), body=build_body(params))
