"""Tests for cms_decode.core.transforms — draft/commit editing of the chain."""

import pytest
from cms_decode.core.transforms import TransformChain
from cms_decode.core.types import ColorSpaceTransform

A = ColorSpaceTransform('a')
B = ColorSpaceTransform('b', {'gain': 2})
C = ColorSpaceTransform('c')


class TestDraftCommit:
    def test_discard_leaves_chain_unchanged(self) -> None:
        chain = TransformChain([A, B])
        draft = chain.begin_edit()
        draft.append(C)
        draft.remove(0)
        chain.discard(draft)
        assert chain.steps() == (A, B)

    def test_commit_applies_final_order(self) -> None:
        chain = TransformChain([A, B])
        draft = chain.begin_edit()
        draft.append(C)
        draft.move(2, 0)
        draft.insert(1, A)
        chain.commit(draft)
        assert chain.steps() == (C, A, A, B)

    def test_edits_not_visible_before_commit(self) -> None:
        chain = TransformChain([A])
        draft = chain.begin_edit()
        draft.clear()
        draft.extend([B, C])
        assert chain.steps() == (A,)
        assert list(draft) == [B, C]

    def test_duplicates_allowed(self) -> None:
        chain = TransformChain()
        draft = chain.begin_edit()
        draft.extend([A, A, A])
        chain.commit(draft)
        assert len(chain) == 3

    def test_remove_returns_step(self) -> None:
        draft = TransformChain([A, B]).begin_edit()
        assert draft.remove(-1) == B
        assert draft.steps() == (A,)

    def test_two_drafts_independent(self) -> None:
        chain = TransformChain([A])
        first = chain.begin_edit()
        second = chain.begin_edit()
        first.append(B)
        second.append(C)
        chain.commit(second)
        chain.discard(first)
        assert chain.steps() == (A, C)


class TestDraftLifecycle:
    def test_draft_single_use_after_commit(self) -> None:
        chain = TransformChain()
        draft = chain.begin_edit()
        chain.commit(draft)
        assert draft.finished
        with pytest.raises(RuntimeError):
            draft.append(A)
        with pytest.raises(RuntimeError):
            chain.commit(draft)

    def test_draft_single_use_after_discard(self) -> None:
        chain = TransformChain()
        draft = chain.begin_edit()
        chain.discard(draft)
        with pytest.raises(RuntimeError):
            chain.commit(draft)

    def test_foreign_draft_rejected(self) -> None:
        draft = TransformChain([A]).begin_edit()
        other = TransformChain()
        with pytest.raises(ValueError):
            other.commit(draft)
        assert other.steps() == ()

    def test_malformed_transform_fails_fast(self) -> None:
        draft = TransformChain().begin_edit()
        with pytest.raises(TypeError):
            draft.append('not a transform')


class TestColorSpaceTransform:
    def test_value_equality(self) -> None:
        assert ColorSpaceTransform('x', {'k': 1}) == ColorSpaceTransform('x', {'k': 1})

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            ColorSpaceTransform('')

    def test_options_must_be_dict(self) -> None:
        with pytest.raises(TypeError):
            ColorSpaceTransform('x', [1, 2])
