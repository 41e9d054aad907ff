"""
Unit tests for deletion handlers and the deletion consumer.
"""
from unittest.mock import Mock

import pytest

from src.deletion.deletion_consumer import DeletionConsumer
from src.deletion.handlers import get_all_handlers, get_handler
from src.deletion.handlers.base_handler import DeletionHandler
from src.deletion.handlers.like_handler import LikeRemovalHandler
from src.deletion.handlers.post_handler import PostDeletionHandler
from src.models import Category
from src.traversal.date_parser import DateParser
from src.utils.statistics import StatisticsReporter


@pytest.mark.unit
class TestBaseHandler:
    """Test DeletionHandler base class."""

    def test_abstract_methods(self):
        """Test that DeletionHandler is abstract."""
        with pytest.raises(TypeError):
            # Cannot instantiate abstract class
            DeletionHandler(Mock())


@pytest.mark.unit
class TestPostDeletionHandler:
    """Test PostDeletionHandler."""

    def test_can_handle_post(self, mock_client):
        assert PostDeletionHandler(mock_client).can_handle(Category.POST) is True

    def test_can_handle_like(self, mock_client):
        assert PostDeletionHandler(mock_client).can_handle(Category.LIKE) is False

    def test_delete_success(self, mock_client, make_item):
        success, message = PostDeletionHandler(mock_client).delete(make_item(42))

        assert success is True
        assert "success" in message.lower()
        mock_client.delete_post.assert_called_once_with(42)
        mock_client.remove_like.assert_not_called()

    def test_delete_failure(self, mock_client, make_item):
        mock_client.delete_post.side_effect = Exception("No status found with that ID.")

        success, message = PostDeletionHandler(mock_client).delete(make_item(42))

        assert success is False
        assert "No status found" in message


@pytest.mark.unit
class TestLikeRemovalHandler:
    """Test LikeRemovalHandler."""

    def test_can_handle_like(self, mock_client):
        assert LikeRemovalHandler(mock_client).can_handle(Category.LIKE) is True

    def test_delete_calls_remove_like(self, mock_client, make_item):
        success, _ = LikeRemovalHandler(mock_client).delete(make_item(7))

        assert success is True
        mock_client.remove_like.assert_called_once_with(7)
        mock_client.delete_post.assert_not_called()

    def test_delete_failure(self, mock_client, make_item):
        mock_client.remove_like.side_effect = Exception("not liked")

        success, message = LikeRemovalHandler(mock_client).delete(make_item(7))

        assert success is False
        assert "not liked" in message


@pytest.mark.unit
class TestHandlerRegistry:
    """Test handler selection."""

    def test_get_all_handlers(self, mock_client):
        handlers = get_all_handlers(mock_client)
        assert {type(h) for h in handlers} == {PostDeletionHandler, LikeRemovalHandler}
        assert all(h.client is mock_client for h in handlers)

    @pytest.mark.parametrize(
        "category,expected",
        [(Category.POST, PostDeletionHandler), (Category.LIKE, LikeRemovalHandler)],
    )
    def test_get_handler(self, mock_client, category, expected):
        assert isinstance(get_handler(category, mock_client), expected)


@pytest.mark.unit
class TestDeletionConsumer:
    """Test DeletionConsumer.run()."""

    def test_dry_run_makes_no_destructive_calls(self, mock_client, make_item):
        consumer = DeletionConsumer(PostDeletionHandler(mock_client))

        result = consumer.run([make_item(1), make_item(2)], Category.POST, commit=False)

        assert result == {"processed": 2, "deleted": 0, "failed": 0}
        mock_client.delete_post.assert_not_called()

    def test_commit_deletes_in_receipt_order(self, mock_client, make_item):
        consumer = DeletionConsumer(PostDeletionHandler(mock_client))

        result = consumer.run([make_item(3), make_item(1), make_item(2)], Category.POST, commit=True)

        assert [c.args[0] for c in mock_client.delete_post.call_args_list] == [3, 1, 2]
        assert result["deleted"] == 3

    def test_failure_does_not_stop_processing(self, mock_client, make_item):
        mock_client.remove_like.side_effect = [Exception("boom"), None]
        consumer = DeletionConsumer(LikeRemovalHandler(mock_client))

        result = consumer.run([make_item(1), make_item(2)], Category.LIKE, commit=True)

        assert mock_client.remove_like.call_count == 2
        assert result == {"processed": 2, "deleted": 1, "failed": 1}

    def test_handler_exception_is_contained(self, make_item):
        handler = Mock()
        handler.delete.side_effect = RuntimeError("unexpected")
        consumer = DeletionConsumer(handler)

        result = consumer.run([make_item(1), make_item(2)], Category.POST, commit=True)

        assert result["failed"] == 2
        assert handler.delete.call_count == 2

    def test_logs_one_line_per_item(self, mock_client, make_item):
        mock_logger = Mock()
        consumer = DeletionConsumer(PostDeletionHandler(mock_client), logger_instance=mock_logger)
        item = make_item(123, text="old news")

        consumer.run([item], Category.POST, commit=False)

        mock_logger.info.assert_called_once_with(
            f"Tweet: 123 {DateParser.format_local(item.created_at)} - old news"
        )

    def test_format_item_like(self, make_item):
        item = make_item(9, text="nice")
        line = DeletionConsumer.format_item(item, Category.LIKE)
        assert line.startswith("Like: 9 ")
        assert line.endswith(" - nice")

    def test_empty_stream(self, mock_client):
        result = DeletionConsumer(PostDeletionHandler(mock_client)).run([], Category.POST, True)
        assert result == {"processed": 0, "deleted": 0, "failed": 0}

    def test_statistics_recorded(self, mock_client, make_item):
        mock_client.delete_post.side_effect = [None, Exception("gone")]
        stats = StatisticsReporter(commit=True)
        consumer = DeletionConsumer(PostDeletionHandler(mock_client), stats=stats)

        consumer.run([make_item(1), make_item(2)], Category.POST, commit=True)

        counters = stats.stats[Category.POST]
        assert counters["items_processed"] == 2
        assert counters["items_deleted"] == 1
        assert counters["action_failures"] == 1
