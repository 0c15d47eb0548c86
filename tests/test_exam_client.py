import threading
from unittest import mock

import pytest
import requests

from libs.exam_client import (
    AuthenticationRequiredError,
    ExamAPIClient,
    ExamAPIError,
    ExamAPIUnavailableError,
    ExamNotAvailableError,
    ExamSession,
    IncompleteAnswersError,
    ResultAlreadyExistsError,
    SessionState,
    SessionStateError,
    SubmissionInProgressError,
    SubmissionRejectedError,
)
from lms.domain.exams.entities import Choice


EXAM = {
    "title": "Quiz",
    "description": "",
    "type": "assignment",
    "maxScore": 3,
    "questions": [
        {"question": "Q1", "options": {"A": "a", "B": "b", "C": "c", "D": "d"}, "points": 2},
        {"question": "Q2", "options": {"A": "a", "B": "b", "C": "c", "D": "d"}, "points": 1},
    ],
}

RESULT = {"score": 2, "maxScore": 3, "percentage": 66.67, "timeSpent": 30}


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


class FakeClient:
    def __init__(self, exam_response=None, submit_response=None, submit_error=None):
        self.exam_response = exam_response or {"exam": EXAM, "hasSubmitted": False, "existingResult": None}
        self.submit_response = submit_response or {"result": RESULT}
        self.submit_error = submit_error
        self.submissions = []

    def fetch_exam(self, exam_id):
        if isinstance(self.exam_response, Exception):
            raise self.exam_response
        return self.exam_response

    def submit(self, exam_id, *, answers, time_spent):
        self.submissions.append({"answers": answers, "timeSpent": time_spent})
        if self.submit_error is not None:
            raise self.submit_error
        return self.submit_response

    def fetch_my_result(self, exam_id):
        return {"result": {**RESULT, "examDetails": {"questions": []}}}


def loaded_session(client=None, clock=None):
    session = ExamSession(client or FakeClient(), 7, clock=clock or FakeClock())
    session.load()
    return session


class TestLoad:
    def test_initial_state(self):
        session = ExamSession(FakeClient(), 7)
        assert session.state is SessionState.LOADING
        assert session.elapsed_seconds == 0

    def test_not_submitted_starts_in_progress(self):
        session = loaded_session()
        assert session.state is SessionState.IN_PROGRESS
        assert session.answers == (None, None)
        assert session.answered_count == 0

    def test_already_submitted_goes_completed(self):
        client = FakeClient(exam_response={"exam": EXAM, "hasSubmitted": True, "result": RESULT})
        session = loaded_session(client)
        assert session.state is SessionState.COMPLETED
        assert session.result == RESULT
        assert session.answers == ()

    def test_load_failure_is_fatal(self):
        session = ExamSession(FakeClient(exam_response=ExamNotAvailableError(404, "Exam not found")), 7)
        with pytest.raises(ExamNotAvailableError):
            session.load()
        with pytest.raises(SessionStateError):
            session.load()
        with pytest.raises(SessionStateError):
            session.set_answer(0, "A")

    def test_double_load_rejected(self):
        session = loaded_session()
        with pytest.raises(SessionStateError):
            session.load()


class TestAnswers:
    def test_set_answer_overwrites(self):
        session = loaded_session()
        session.set_answer(0, "a")
        session.set_answer(0, Choice.C)
        assert session.answers == (Choice.C, None)

    def test_clear_answer(self):
        session = loaded_session()
        session.set_answer(1, "B")
        session.clear_answer(1)
        assert session.answered_count == 0

    @pytest.mark.parametrize("index", [-1, 2, "0"])
    def test_out_of_range_index(self, index):
        with pytest.raises(IndexError):
            loaded_session().set_answer(index, "A")

    def test_invalid_choice(self):
        with pytest.raises(ValueError):
            loaded_session().set_answer(0, "E")

    def test_completeness(self):
        session = loaded_session()
        session.set_answer(0, "B")
        assert not session.is_complete
        assert not session.can_submit
        session.set_answer(1, "A")
        assert session.is_complete
        assert session.can_submit


class TestElapsed:
    def test_whole_seconds_from_clock(self):
        clock = FakeClock(10.0)
        session = loaded_session(clock=clock)
        clock.now = 75.9
        assert session.elapsed_seconds == 65

    def test_reading_timer_does_not_touch_buffer(self):
        session = loaded_session()
        session.set_answer(0, "A")
        _ = session.elapsed_seconds
        assert session.answers == (Choice.A, None)


class TestSubmit:
    def test_success_completes_with_result(self):
        clock = FakeClock(0.0)
        client = FakeClient()
        session = loaded_session(client, clock)
        session.set_answer(0, "B")
        session.set_answer(1, "C")
        clock.now = 30.2

        assert session.submit() == RESULT
        assert session.state is SessionState.COMPLETED
        assert client.submissions == [{
            "answers": [
                {"questionIndex": 0, "selectedAnswer": "B"},
                {"questionIndex": 1, "selectedAnswer": "C"},
            ],
            "timeSpent": 30,
        }]

    def test_incomplete_rejected_locally(self):
        client = FakeClient()
        session = loaded_session(client)
        session.set_answer(0, "B")
        with pytest.raises(IncompleteAnswersError) as e:
            session.submit()
        assert (e.value.answered, e.value.total) == (1, 2)
        assert client.submissions == []
        assert session.state is SessionState.IN_PROGRESS

    def test_incomplete_allowed_when_not_required(self):
        client = FakeClient()
        session = loaded_session(client)
        session.set_answer(1, "A")
        session.submit(require_complete=False)
        assert client.submissions[0]["answers"][0] == {"questionIndex": 0, "selectedAnswer": None}

    def test_conflict_adopts_existing_result(self):
        existing = {**RESULT, "score": 3}
        client = FakeClient(
            submit_error=ResultAlreadyExistsError(409, "You have already submitted this exam", {"result": existing}),
        )
        session = loaded_session(client)
        session.set_answer(0, "A")
        session.set_answer(1, "A")

        assert session.submit() == existing
        assert session.state is SessionState.COMPLETED
        assert session.result == existing

    @pytest.mark.parametrize(
        "error",
        [
            SubmissionRejectedError(400, "Malformed submission", {"errors": {"answers": ["x"]}}),
            ExamAPIError(500, "Internal server error"),
            ExamAPIUnavailableError("timeout"),
        ],
    )
    def test_other_failures_keep_buffer(self, error):
        client = FakeClient(submit_error=error)
        session = loaded_session(client)
        session.set_answer(0, "B")
        session.set_answer(1, "C")

        with pytest.raises(type(error)):
            session.submit()

        assert session.state is SessionState.IN_PROGRESS
        assert session.answers == (Choice.B, Choice.C)
        assert session.can_submit

    def test_completed_rejects_mutation(self):
        session = loaded_session()
        session.set_answer(0, "B")
        session.set_answer(1, "C")
        session.submit()

        with pytest.raises(SessionStateError):
            session.set_answer(0, "A")
        with pytest.raises(SessionStateError):
            session.submit()

    def test_only_one_submission_in_flight(self):
        entered = threading.Event()
        release = threading.Event()

        class SlowClient(FakeClient):
            def submit(self, exam_id, *, answers, time_spent):
                entered.set()
                release.wait(timeout=5)
                return super().submit(exam_id, answers=answers, time_spent=time_spent)

        client = SlowClient()
        session = loaded_session(client)
        session.set_answer(0, "B")
        session.set_answer(1, "C")

        worker = threading.Thread(target=session.submit)
        worker.start()
        assert entered.wait(timeout=5)

        assert session.is_submitting
        assert not session.can_submit
        with pytest.raises(SubmissionInProgressError):
            session.submit()

        release.set()
        worker.join(timeout=5)
        assert session.state is SessionState.COMPLETED
        assert len(client.submissions) == 1


class TestRefreshResult:
    def test_requires_completed(self):
        with pytest.raises(SessionStateError):
            loaded_session().refresh_result()

    def test_fetches_details(self):
        client = FakeClient(exam_response={"exam": EXAM, "hasSubmitted": True, "result": RESULT})
        session = loaded_session(client)
        assert "examDetails" in session.refresh_result()


def fake_response(status, body=None):
    resp = mock.Mock()
    resp.status_code = status
    resp.content = b"{}" if body is not None else b""
    resp.json.return_value = body
    return resp


class TestExamAPIClient:
    def make(self, response=None, error=None):
        http = mock.Mock(spec=requests.Session)
        if error is not None:
            http.request.side_effect = error
        else:
            http.request.return_value = response
        return ExamAPIClient("http://api.test/api/v1/", access_token="tok", session=http), http

    def test_submit_sends_bearer_and_body(self):
        client, http = self.make(fake_response(201, {"result": RESULT}))
        assert client.submit(5, answers=[], time_spent=12) == {"result": RESULT}

        args, kwargs = http.request.call_args
        assert args == ("POST", "http://api.test/api/v1/exam/5/submit/")
        assert kwargs["json"] == {"answers": [], "timeSpent": 12}
        assert kwargs["headers"]["Authorization"] == "Bearer tok"
        assert kwargs["timeout"] == 10.0

    @pytest.mark.parametrize(
        "status,cls",
        [
            (400, SubmissionRejectedError),
            (401, AuthenticationRequiredError),
            (403, ExamNotAvailableError),
            (404, ExamNotAvailableError),
            (409, ResultAlreadyExistsError),
            (500, ExamAPIError),
        ],
    )
    def test_status_mapping(self, status, cls):
        client, _ = self.make(fake_response(status, {"status": status, "message": "nope"}))
        with pytest.raises(cls) as e:
            client.fetch_exam(1)
        assert type(e.value) is cls
        assert e.value.status == status
        assert e.value.message == "nope"

    def test_conflict_carries_result(self):
        body = {"status": 409, "message": "You have already submitted this exam", "result": RESULT}
        client, _ = self.make(fake_response(409, body))
        with pytest.raises(ResultAlreadyExistsError) as e:
            client.submit(1, answers=[], time_spent=0)
        assert e.value.result == RESULT

    def test_network_failure(self):
        client, _ = self.make(error=requests.ConnectionError("down"))
        with pytest.raises(ExamAPIUnavailableError):
            client.fetch_my_result(1)

    def test_requires_base_url(self):
        with pytest.raises(ValueError):
            ExamAPIClient("")
