from __future__ import annotations

import asyncio
import threading

from vitrine.utils.tasks import BackgroundRunner


def test_submit_runs_coroutine_in_worker_thread() -> None:
	results: list[tuple[str, str]] = []
	done = threading.Event()

	async def work() -> str:
		await asyncio.sleep(0)
		return threading.current_thread().name

	def on_done(worker_name: str) -> None:
		results.append((worker_name, threading.current_thread().name))
		done.set()

	thread = BackgroundRunner().submit(work, on_done)
	thread.join(timeout=5)

	assert done.is_set()
	worker_name, callback_thread = results[0]
	assert worker_name != threading.main_thread().name
	assert callback_thread == worker_name


def test_dispatch_receives_result() -> None:
	queued: list[tuple] = []
	runner = BackgroundRunner(dispatch=lambda func, *args: queued.append((func, args)))

	async def work() -> int:
		return 42

	received: list[int] = []
	runner.submit(work, received.append).join(timeout=5)

	# Nothing runs until the main loop drains the queue
	assert received == []
	func, args = queued[0]
	assert func(*args) is False
	assert received == [42]


def test_failed_coroutine_is_logged_and_reported(caplog) -> None:
	done: list[object] = []
	errors: list[Exception] = []

	async def work() -> None:
		raise RuntimeError("boom")

	BackgroundRunner().submit(work, done.append, errors.append).join(timeout=5)

	assert done == []
	assert len(errors) == 1
	assert isinstance(errors[0], RuntimeError)
	assert "Background task failed" in caplog.text


def test_failed_coroutine_without_error_callback_is_logged(caplog) -> None:
	done: list[object] = []

	async def work() -> None:
		raise RuntimeError("boom")

	BackgroundRunner().submit(work, done.append).join(timeout=5)

	assert done == []
	assert "Background task failed" in caplog.text
