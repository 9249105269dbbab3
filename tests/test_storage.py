"""
Tests for the JSON save slot.
"""

import json

import numpy as np
import pytest

from onetwentyeight.core.types import MAX_CELL, InvalidSaveState, SaveState, validate_board
from onetwentyeight.envs import OneTwentyEight
from onetwentyeight.storage import STORAGE_KEY, MemorySlot, SaveSlot

BOARD = np.array([[2, 0, 0, 0], [0, 4, 0, 0], [0, 0, 64, 0], [0, 0, 0, 128]])


@pytest.fixture
def slot(tmp_path):
    return SaveSlot(tmp_path / 'storage.json')


def write_record(slot, record):
    slot.path.write_text(json.dumps({STORAGE_KEY: json.dumps(record)}), encoding='utf-8')


class TestSaveSlot:
    """Round trip and recovery of the file-backed slot."""

    def test_round_trip(self, slot):
        state = SaveState(board=BOARD, score=312, terminal=True)
        slot.save(state)
        assert slot.load() == state

    def test_round_trip_fresh_state(self, slot):
        state = SaveState(board=np.zeros((4, 4), dtype=np.int64))
        slot.save(state)
        assert slot.load() == state

    def test_storage_schema(self, slot):
        slot.save(SaveState(board=BOARD, score=8, terminal=False))
        document = json.loads(slot.path.read_text(encoding='utf-8'))
        record = json.loads(document[STORAGE_KEY])
        assert record == {'board': BOARD.tolist(), 'score': 8, 'gameOver': False}

    def test_missing_file(self, slot):
        assert slot.load() is None

    def test_missing_key(self, slot):
        slot.path.write_text(json.dumps({'other': '1'}), encoding='utf-8')
        assert slot.load() is None

    def test_unparsable_document(self, slot):
        slot.path.write_text('{not json', encoding='utf-8')
        assert slot.load() is None

    def test_unparsable_record(self, slot):
        slot.path.write_text(json.dumps({STORAGE_KEY: '{not json'}), encoding='utf-8')
        assert slot.load() is None

    @pytest.mark.parametrize(
        'record',
        [
            {'board': BOARD.tolist(), 'score': 0},
            {'board': BOARD.tolist(), 'score': -4, 'gameOver': False},
            {'board': BOARD.tolist(), 'score': 4, 'gameOver': 'no'},
            {'board': BOARD.tolist()[:3], 'score': 4, 'gameOver': False},
            {'board': [[3, 0, 0, 0]] * 4, 'score': 4, 'gameOver': False},
            {'board': [[2.5, 0, 0, 0]] * 4, 'score': 4, 'gameOver': False},
            {'board': [[2**64, 0, 0, 0]] + [[0] * 4] * 3, 'score': 4, 'gameOver': False},
            [1, 2, 3],
        ],
    )
    def test_malformed_record(self, slot, record):
        write_record(slot, record)
        assert slot.load() is None

    def test_deeply_nested_record(self, slot):
        slot.path.write_text(json.dumps({STORAGE_KEY: '[' * 100000 + ']' * 100000}), encoding='utf-8')
        assert slot.load() is None

    def test_deeply_nested_document(self, slot):
        slot.path.write_text('[' * 100000 + ']' * 100000, encoding='utf-8')
        assert slot.load() is None
        state = SaveState(board=BOARD, score=4)
        slot.save(state)
        assert slot.load() == state

    def test_oversized_tile_starts_fresh_game(self, slot):
        write_record(slot, {'board': [[2**64, 0, 0, 0]] + [[0] * 4] * 3, 'score': 4, 'gameOver': False})
        env = OneTwentyEight(slot=slot, seed=0)
        assert env.score == 0
        assert np.count_nonzero(env.board) == 2

    def test_save_keeps_other_keys(self, slot):
        slot.path.write_text(json.dumps({'theme': 'dark'}), encoding='utf-8')
        slot.save(SaveState(board=BOARD, score=4))
        document = json.loads(slot.path.read_text(encoding='utf-8'))
        assert document['theme'] == 'dark'
        assert STORAGE_KEY in document

    def test_save_overwrites_corrupt_document(self, slot):
        slot.path.write_text('garbage', encoding='utf-8')
        state = SaveState(board=BOARD, score=4)
        slot.save(state)
        assert slot.load() == state

    def test_save_failure_is_swallowed(self, tmp_path, caplog):
        """Saving under a path whose parent is a file fails quietly."""
        blocker = tmp_path / 'blocker'
        blocker.write_text('', encoding='utf-8')
        slot = SaveSlot(blocker / 'storage.json')

        slot.save(SaveState(board=BOARD, score=4))

        assert slot.load() is None
        assert 'Cannot save game' in caplog.text

    def test_clear(self, slot):
        slot.save(SaveState(board=BOARD, score=4))
        slot.clear()
        assert slot.load() is None
        slot.clear()

    def test_custom_key(self, tmp_path):
        path = tmp_path / 'storage.json'
        first, second = SaveSlot(path, key='a'), SaveSlot(path, key='b')
        first.save(SaveState(board=BOARD, score=4))
        assert second.load() is None
        assert first.load().score == 4


class TestMemorySlot:
    def test_round_trip(self):
        slot = MemorySlot()
        assert slot.load() is None
        state = SaveState(board=BOARD, score=12, terminal=True)
        slot.save(state)
        assert slot.load() == state
        slot.clear()
        assert slot.load() is None

    def test_deeply_nested_record(self):
        slot = MemorySlot()
        slot._records[slot.key] = '[' * 100000 + ']' * 100000
        assert slot.load() is None


class TestSaveState:
    def test_equality_compares_boards(self):
        assert SaveState(board=BOARD.copy(), score=4) == SaveState(board=BOARD.copy(), score=4)
        assert SaveState(board=BOARD, score=4) != SaveState(board=np.zeros((4, 4), dtype=np.int64), score=4)
        assert SaveState(board=BOARD, score=4) != SaveState(board=BOARD, score=4, terminal=True)

    def test_to_dict_uses_plain_ints(self):
        record = SaveState(board=BOARD, score=np.int64(4)).to_dict()
        assert all(type(value) is int for row in record['board'] for value in row)
        assert type(record['score']) is int

    def test_validate_board_rejects_booleans(self):
        with pytest.raises(InvalidSaveState):
            validate_board([[True, 0, 0, 0]] * 4)

    def test_validate_board_rejects_oversized_tiles(self):
        with pytest.raises(InvalidSaveState):
            validate_board([[2**63, 0, 0, 0]] + [[0] * 4] * 3)
        board = validate_board([[MAX_CELL, 0, 0, 0]] + [[0] * 4] * 3)
        assert board[0, 0] == MAX_CELL

    def test_validate_board_rejects_text(self):
        with pytest.raises(InvalidSaveState):
            validate_board('0000')
