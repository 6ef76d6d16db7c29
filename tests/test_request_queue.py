import pytest

from simulation import Direction, InvalidDirection, InvalidFloor, RequestError, RequestQueue


@pytest.fixture
def queue() -> RequestQueue:
    return RequestQueue(num_floors=10)


class TestSubmit:

    def test_ids_are_monotonic_and_order_is_kept(self, queue):
        first = queue.submit(5, Direction.UP, created_at=0)
        second = queue.submit(3, Direction.DOWN, created_at=4)
        assert (first.request_id, second.request_id) == (1, 2)
        assert queue.pending() == (first, second)
        assert second.created_at == 4

    def test_same_floor_and_direction_are_independent_requests(self, queue):
        a = queue.submit(4, "UP", created_at=0)
        b = queue.submit(4, "UP", created_at=0)
        assert a != b
        assert len(queue) == 2

    def test_direction_strings_are_case_insensitive(self, queue):
        request = queue.submit(2, "down", created_at=0)
        assert request.direction is Direction.DOWN

    def test_pending_is_a_read_only_snapshot(self, queue):
        queue.submit(2, "UP", created_at=0)
        pending = queue.pending()
        assert isinstance(pending, tuple)
        queue.submit(3, "UP", created_at=0)
        assert len(pending) == 1

    def test_take_removes_exactly_that_request(self, queue):
        a = queue.submit(2, "UP", created_at=0)
        b = queue.submit(2, "UP", created_at=0)
        queue.take(a)
        assert queue.pending() == (b,)


class TestValidation:

    @pytest.mark.parametrize("floor", [0, 11, -3])
    def test_floor_outside_range(self, queue, floor):
        with pytest.raises(InvalidFloor):
            queue.submit(floor, "UP", created_at=0)
        assert not queue

    def test_up_at_top_floor(self, queue):
        with pytest.raises(InvalidDirection):
            queue.submit(10, "UP", created_at=0)

    def test_down_at_bottom_floor(self, queue):
        with pytest.raises(InvalidDirection):
            queue.submit(1, Direction.DOWN, created_at=0)

    @pytest.mark.parametrize("direction", ["IDLE", "sideways", ""])
    def test_unknown_or_idle_direction(self, queue, direction):
        with pytest.raises(InvalidDirection):
            queue.submit(5, direction, created_at=0)

    def test_errors_are_value_errors(self):
        assert issubclass(InvalidFloor, RequestError)
        assert issubclass(InvalidDirection, RequestError)
        assert issubclass(RequestError, ValueError)

    def test_failed_submit_does_not_consume_an_id(self, queue):
        with pytest.raises(InvalidFloor):
            queue.submit(42, "UP", created_at=0)
        assert queue.submit(4, "UP", created_at=0).request_id == 1
