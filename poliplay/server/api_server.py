"""FastAPI server that exposes the browser player and the round endpoints."""

from __future__ import annotations

from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
import uvicorn

from poliplay.constants.about import APP_NAME, APP_VERSION
from poliplay.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT, ROUND_POLL_INTERVAL_MS
from poliplay.constants.quiz_constants import NO_QUESTIONS_MESSAGE
from poliplay.core.errors import AnswerKindMismatch, NoActiveRound, NoQuestionsAvailable
from poliplay.core.markdown_renderer import renderer
from poliplay.core.models import (
    AnswerEvent,
    IdentificationAnswer,
    MultipleChoiceAnswer,
    RoundSnapshot,
    Verdict,
)
from poliplay.core.quiz_manager import QuizManager

_PLAYER_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>PoliPlay</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #0b1120; color: #f5f7ff; }
      body { margin: 0; padding: 1.5rem; display: flex; flex-direction: column; gap: 1rem; }
      h1 { margin: 0; }
      .card { background: #111a30; border-radius: 0.75rem; padding: 1.5rem; box-shadow: 0 0.5rem 1.5rem rgba(0, 0, 0, 0.4); }
      .hidden { display: none; }
      .category-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 0.75rem; }
      .category-button, .primary-button { border: none; border-radius: 0.75rem; padding: 1rem; font-size: 1rem; background: #1f9aa5; color: #fff; cursor: pointer; transition: transform 120ms ease, background 120ms ease; }
      .category-button:hover, .primary-button:hover { transform: translateY(-2px); background: #16808a; }
      .modal-header { display: flex; justify-content: space-between; align-items: center; }
      #timer { font-size: 2rem; font-weight: 700; color: #facc15; }
      #timer.warning { color: #ef4444; }
      #question-text { min-height: 4rem; font-size: 1.15rem; line-height: 1.6; }
      .answers-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 0.75rem; }
      .answer-btn { border: 2px solid transparent; border-radius: 0.75rem; padding: 1rem; font-size: 1rem; background: #1e293b; color: #fff; cursor: pointer; text-align: left; }
      .answer-btn:disabled { cursor: not-allowed; opacity: 0.85; }
      .answer-btn.correct, .answer-input.correct { border-color: #34d399; background: #065f46; }
      .answer-btn.wrong, .answer-input.wrong { border-color: #ef4444; background: #7f1d1d; }
      .answer-input { width: 100%; box-sizing: border-box; padding: 0.85rem; font-size: 1rem; border-radius: 0.75rem; border: 2px solid #334155; background: #0f172a; color: #fff; }
      #feedback { min-height: 1.5rem; font-weight: 600; }
      .actions { display: flex; gap: 0.75rem; margin-top: 1rem; }
    </style>
  </head>
  <body>
    <section class="card" id="category-card">
      <h1>PoliPlay</h1>
      <p>Choose a category to get a random question. You have 20 seconds to answer.</p>
      <div id="category-list" class="category-grid"></div>
    </section>
    <section class="card hidden" id="question-modal">
      <div class="modal-header">
        <h2 id="category-title"></h2>
        <span id="timer"></span>
      </div>
      <div id="question-text"></div>
      <div id="answers-container"></div>
      <p id="feedback"></p>
      <div class="actions">
        <button id="next-button" class="primary-button">Next Question</button>
        <button id="close-button" class="primary-button">Close</button>
      </div>
    </section>
    <script>
      const POLL_INTERVAL_MS = __POLL_INTERVAL_MS__;
      const categoryCard = document.getElementById('category-card');
      const categoryList = document.getElementById('category-list');
      const modal = document.getElementById('question-modal');
      const categoryTitle = document.getElementById('category-title');
      const timerEl = document.getElementById('timer');
      const questionText = document.getElementById('question-text');
      const answersContainer = document.getElementById('answers-container');
      const feedbackEl = document.getElementById('feedback');

      let pollHandle = null;
      let currentCategory = null;
      let verdictShown = false;
      let audioContext = null;

      function playCue(cue) {
        try {
          audioContext = audioContext || new (window.AudioContext || window.webkitAudioContext)();
          const oscillator = audioContext.createOscillator();
          const gain = audioContext.createGain();
          oscillator.frequency.value = cue === 'correct' ? 880 : 196;
          oscillator.type = cue === 'correct' ? 'sine' : 'sawtooth';
          gain.gain.value = 0.15;
          oscillator.connect(gain).connect(audioContext.destination);
          oscillator.start();
          oscillator.stop(audioContext.currentTime + 0.35);
        } catch (error) {
          console.log('Audio play failed:', error);
        }
      }

      async function loadCategories() {
        const response = await fetch('/categories');
        const payload = await response.json();
        categoryList.innerHTML = '';
        payload.categories.forEach(category => {
          const button = document.createElement('button');
          button.className = 'category-button';
          button.textContent = category;
          button.onclick = () => startRound(category);
          categoryList.appendChild(button);
        });
      }

      async function startRound(category) {
        const response = await fetch('/round', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({ category })
        });
        const body = await response.json().catch(() => ({}));
        if (!response.ok) {
          alert(body.detail || 'Unable to start a round.');
          return;
        }
        currentCategory = category;
        verdictShown = false;
        renderRound(body);
        modal.classList.remove('hidden');
        categoryCard.classList.add('hidden');
        if (pollHandle) {
          clearInterval(pollHandle);
        }
        pollHandle = setInterval(pollRound, POLL_INTERVAL_MS);
      }

      function renderRound(round) {
        categoryTitle.textContent = round.category;
        questionText.innerHTML = round.question_html;
        answersContainer.innerHTML = '';
        feedbackEl.textContent = '';
        timerEl.classList.remove('warning');
        updateTimer(round);
        if (round.kind === 'Multiple Choice') {
          const grid = document.createElement('div');
          grid.className = 'answers-grid';
          round.options.forEach((label, index) => {
            const button = document.createElement('button');
            button.className = 'answer-btn';
            button.textContent = label;
            button.dataset.index = index;
            button.onclick = () => submitAnswer({ letter: label.charAt(0) });
            grid.appendChild(button);
          });
          answersContainer.appendChild(grid);
        } else {
          const input = document.createElement('input');
          input.type = 'text';
          input.className = 'answer-input';
          input.id = 'identification-input';
          input.placeholder = 'Type your answer here...';
          const submit = document.createElement('button');
          submit.className = 'primary-button';
          submit.id = 'identification-submit';
          submit.textContent = 'Submit Answer';
          submit.onclick = () => submitAnswer({ text: input.value });
          input.addEventListener('keypress', event => {
            if (event.key === 'Enter') {
              submit.click();
            }
          });
          answersContainer.appendChild(input);
          answersContainer.appendChild(submit);
        }
      }

      function updateTimer(round) {
        timerEl.textContent = round.remaining_seconds;
        if (round.warning) {
          timerEl.classList.add('warning');
        }
      }

      function disableAnswers() {
        answersContainer.querySelectorAll('button, input').forEach(el => (el.disabled = true));
      }

      function showVerdict(round) {
        if (verdictShown || !round.verdict) {
          return;
        }
        verdictShown = true;
        const verdict = round.verdict;
        disableAnswers();
        playCue(verdict.cue);
        if (verdict.timed_out) {
          feedbackEl.textContent = 'Time is up!';
          return;
        }
        answersContainer.querySelectorAll('.answer-btn').forEach(button => {
          const mark = verdict.option_marks[Number(button.dataset.index)];
          if (mark) {
            button.classList.add(mark);
          }
        });
        const input = document.getElementById('identification-input');
        if (input) {
          input.classList.add(verdict.correct ? 'correct' : 'wrong');
        }
        feedbackEl.textContent = verdict.correct ? 'Correct!' : 'Wrong!';
        if (verdict.revealed_answer) {
          setTimeout(() => {
            feedbackEl.textContent = `Correct answer: ${verdict.revealed_answer}`;
          }, verdict.reveal_delay_ms);
        }
      }

      async function pollRound() {
        const response = await fetch('/round');
        const round = await response.json();
        if (round.status === 'idle') {
          return;
        }
        updateTimer(round);
        showVerdict(round);
        if (!round.accepting_answers && pollHandle) {
          clearInterval(pollHandle);
          pollHandle = null;
        }
      }

      async function submitAnswer(payload) {
        const response = await fetch('/round/answer', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(payload)
        });
        if (!response.ok) {
          return;
        }
        showVerdict(await response.json());
      }

      async function closeRound() {
        if (pollHandle) {
          clearInterval(pollHandle);
          pollHandle = null;
        }
        await fetch('/round/close', { method: 'POST' });
        modal.classList.add('hidden');
        categoryCard.classList.remove('hidden');
        timerEl.classList.remove('warning');
        loadCategories();
      }

      document.getElementById('close-button').onclick = closeRound;
      document.getElementById('next-button').onclick = () => currentCategory && startRound(currentCategory);
      loadCategories();
    </script>
  </body>
</html>
""".replace("__POLL_INTERVAL_MS__", str(ROUND_POLL_INTERVAL_MS))


class StartRoundPayload(BaseModel):
    """Payload schema for starting a round."""

    category: str


class AnswerPayload(BaseModel):
    """Payload schema for submitted answers: a letter or a typed answer, not both."""

    letter: str | None = None
    text: str | None = None


def _get_quiz_manager_dependency(quiz_manager: QuizManager):
    def dependency() -> QuizManager:
        return quiz_manager

    return dependency


def _to_answer_event(payload: AnswerPayload) -> AnswerEvent:
    if (payload.letter is None) == (payload.text is None):
        raise HTTPException(status_code=422, detail="Provide either 'letter' or 'text'.")
    if payload.letter is not None:
        return MultipleChoiceAnswer(letter=payload.letter)
    return IdentificationAnswer(text=payload.text or "")


def _serialize_verdict(verdict: Verdict | None) -> dict[str, object] | None:
    if verdict is None:
        return None
    return {
        "outcome": verdict.outcome.value,
        "correct": verdict.is_correct,
        "cue": verdict.cue,
        "timed_out": verdict.timed_out,
        "option_marks": [mark.value if mark is not None else None for mark in verdict.option_marks],
        "revealed_answer": verdict.revealed_answer,
        "reveal_delay_ms": verdict.reveal_delay_ms,
    }


def serialize_snapshot(snapshot: RoundSnapshot) -> dict[str, object]:
    """Render a round for the player. The correct answer is never included."""
    question = snapshot.question
    return {
        "status": snapshot.status,
        "category": snapshot.category,
        "question_text": question.text if question else None,
        "question_html": renderer.render_fragment(question.text) if question else None,
        "kind": question.kind.value if question else None,
        "options": snapshot.option_labels,
        "remaining_seconds": snapshot.remaining_seconds,
        "warning": snapshot.warning,
        "accepting_answers": snapshot.accepting_answers,
        "verdict": _serialize_verdict(snapshot.verdict),
    }


def create_api_app(quiz_manager: QuizManager) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz manager."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    quiz_manager_dep = _get_quiz_manager_dependency(quiz_manager)

    @app.get("/", response_class=HTMLResponse)
    def serve_player_page() -> str:
        return _PLAYER_PAGE_HTML

    @app.get("/categories")
    def get_categories(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return {"categories": manager.get_categories()}

    @app.post("/round", status_code=201)
    def start_round(
        payload: StartRoundPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        try:
            snapshot = manager.start_round(payload.category)
        except NoQuestionsAvailable as exc:
            raise HTTPException(status_code=404, detail=NO_QUESTIONS_MESSAGE) from exc
        return serialize_snapshot(snapshot)

    @app.get("/round")
    def get_round(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return serialize_snapshot(manager.get_round_snapshot())

    @app.post("/round/answer")
    def submit_answer(
        payload: AnswerPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        answer = _to_answer_event(payload)
        try:
            snapshot = manager.submit_answer(answer)
        except AnswerKindMismatch as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except NoActiveRound as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return serialize_snapshot(snapshot)

    @app.post("/round/close")
    def close_round(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return serialize_snapshot(manager.close_round())

    return app


def start_api_server(
    quiz_manager: QuizManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(quiz_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="PoliPlayApiServer", daemon=True)
    thread.start()
    return thread
