"""Ordered chain of custom color-space transforms with draft/commit editing.

Edits never touch the chain directly. begin_edit() hands out a detached copy;
commit() swaps the copy in as a whole, discard() drops it. A draft can be
finished only once.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from cms_decode.core.types import ColorSpaceTransform


class TransformChainDraft:
    """Working copy of a TransformChain."""

    def __init__(self, owner: TransformChain, steps: Iterable[ColorSpaceTransform]):
        self._owner = owner
        self._steps = list(steps)
        self._finished = False

    @property
    def owner(self) -> TransformChain:
        return self._owner

    @property
    def finished(self) -> bool:
        return self._finished

    def append(self, transform: ColorSpaceTransform) -> None:
        self._check_open()
        self._steps.append(_check_transform(transform))

    def extend(self, transforms: Iterable[ColorSpaceTransform]) -> None:
        self._check_open()
        self._steps.extend(_check_transform(t) for t in transforms)

    def insert(self, index: int, transform: ColorSpaceTransform) -> None:
        self._check_open()
        self._steps.insert(index, _check_transform(transform))

    def remove(self, index: int) -> ColorSpaceTransform:
        """Remove and return the transform at index."""
        self._check_open()
        return self._steps.pop(index)

    def move(self, source: int, target: int) -> None:
        """Move the transform at source so that it ends up at target."""
        self._check_open()
        step = self._steps.pop(source)
        self._steps.insert(target, step)

    def clear(self) -> None:
        self._check_open()
        self._steps.clear()

    def steps(self) -> tuple[ColorSpaceTransform, ...]:
        return tuple(self._steps)

    def _finish(self) -> tuple[ColorSpaceTransform, ...]:
        self._check_open()
        self._finished = True
        return tuple(self._steps)

    def _check_open(self) -> None:
        if self._finished:
            raise RuntimeError('Transform chain draft was already committed or discarded')

    def __iter__(self) -> Iterator[ColorSpaceTransform]:
        return iter(tuple(self._steps))

    def __len__(self) -> int:
        return len(self._steps)

    def __getitem__(self, index: int) -> ColorSpaceTransform:
        return self._steps[index]


class TransformChain:
    """Committed, ordered transform steps. Duplicates are allowed."""

    def __init__(self, transforms: Iterable[ColorSpaceTransform] = ()):
        self._steps: tuple[ColorSpaceTransform, ...] = tuple(_check_transform(t) for t in transforms)

    def begin_edit(self) -> TransformChainDraft:
        """Snapshot the current steps into a detached draft."""
        return TransformChainDraft(self, self._steps)

    def commit(self, draft: TransformChainDraft) -> None:
        """Replace the chain's steps with the draft's final sequence."""
        self._check_owner(draft)
        self._steps = draft._finish()

    def discard(self, draft: TransformChainDraft) -> None:
        """Abandon the draft; the chain is left untouched."""
        self._check_owner(draft)
        draft._finish()

    def steps(self) -> tuple[ColorSpaceTransform, ...]:
        return self._steps

    def _check_owner(self, draft: TransformChainDraft) -> None:
        if not isinstance(draft, TransformChainDraft):
            raise TypeError(f'Expected TransformChainDraft, got {type(draft).__name__}')
        if draft.owner is not self:
            raise ValueError('Draft was not started on this transform chain')

    def __iter__(self) -> Iterator[ColorSpaceTransform]:
        return iter(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransformChain):
            return NotImplemented
        return self._steps == other._steps

    def __repr__(self) -> str:
        return f'TransformChain({[t.name for t in self._steps]!r})'


def _check_transform(transform: ColorSpaceTransform) -> ColorSpaceTransform:
    if not isinstance(transform, ColorSpaceTransform):
        raise TypeError(f'Expected ColorSpaceTransform, got {type(transform).__name__}')
    return transform
