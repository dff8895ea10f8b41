"""Domain services for deriving cut pieces from frame specifications."""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from .units import Unit, to_millimeters
from .value_objects import CutPiece, FrameSpec, PiecePosition


class PieceListBuilder:
    """Expands frames into the individual linear pieces they require.

    Each frame yields its four edges in a fixed order (top, bottom, left,
    right) followed by its sub-components in list order, each repeated
    ``quantity`` times. Frames are processed in the order given, so the
    output order is fully determined by the input.
    """

    def build(self, frames: Sequence[FrameSpec]) -> list[CutPiece]:
        """Build the cut list for the given frames, in each frame's unit."""
        pieces: list[CutPiece] = []
        for frame in frames:
            pieces.extend(self._edge_pieces(frame))
            pieces.extend(self._sub_component_pieces(frame))
        return pieces

    def normalize(self, pieces: Sequence[CutPiece]) -> list[CutPiece]:
        """Return copies of ``pieces`` with lengths in millimeters."""
        return [
            replace(
                piece,
                length=to_millimeters(piece.length, piece.unit),
                unit=Unit.MILLIMETER,
            )
            for piece in pieces
        ]

    def _edge_pieces(self, frame: FrameSpec) -> list[CutPiece]:
        edges = (
            (frame.width, PiecePosition.TOP),
            (frame.width, PiecePosition.BOTTOM),
            (frame.height, PiecePosition.LEFT),
            (frame.height, PiecePosition.RIGHT),
        )
        return [
            CutPiece(
                length=length,
                unit=frame.unit,
                frame_id=frame.id,
                ref_no=frame.ref_no,
                position=position,
            )
            for length, position in edges
        ]

    def _sub_component_pieces(self, frame: FrameSpec) -> list[CutPiece]:
        pieces: list[CutPiece] = []
        for sub in frame.sub_components:
            for _ in range(sub.quantity):
                pieces.append(
                    CutPiece(
                        length=sub.length,
                        unit=frame.unit,
                        frame_id=frame.id,
                        ref_no=frame.ref_no,
                        position=PiecePosition.ADDITIONAL,
                        sub_component_name=sub.name,
                    )
                )
        return pieces
