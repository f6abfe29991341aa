import json
import re

from careercoach.agents.llm.base import LLMError


def test_home_page(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "Accelerate Your Career with AI" in r.text


def test_coach_page_tabs(client):
    assert "Resume Analyzer" in client.get("/coach").text
    assert "Learning Roadmap Generator" in client.get("/coach?tab=roadmap").text


def test_preset_roadmap_page(client, fake_llm, pro_headers):
    r = client.post("/coach/roadmap", data={"role": "python-developer"}, headers=pro_headers)

    assert r.status_code == 200
    assert "Python Full Stack Developer Roadmap" in r.text
    assert r.text.count('class="roadmap-node"') == 8
    assert fake_llm.calls == []

    graph = json.loads(re.search(r'id="roadmap-graph-data">(.*?)</script>', r.text, re.S).group(1))
    assert len(graph["edges"]) == 7


def test_custom_roadmap_failure_page(client, fake_llm, pro_headers):
    fake_llm.error = LLMError("boom")

    r = client.post("/coach/roadmap", data={"role": "custom", "custom_role": "Game Developer"}, headers=pro_headers)

    assert r.status_code == 200
    assert "Failed to generate roadmap. Using fallback." in r.text
    assert 'class="toast destructive"' in r.text
    assert "Full Stack React Developer Roadmap" in r.text


def test_resume_page_rejects_non_pdf(client, fake_llm, pro_headers):
    r = client.post(
        "/coach/resume",
        files={"resume": ("cv.txt", b"plain text resume", "text/plain")},
        headers=pro_headers,
    )

    assert r.status_code == 200
    assert "Please upload a PDF file" in r.text
    assert fake_llm.calls == []


def test_resume_page_analysis(client, fake_llm, pro_headers, analysis_json):
    fake_llm.responses = [analysis_json]

    r = client.post(
        "/coach/resume",
        files={"resume": ("cv.pdf", b"%PDF-1.4 fake", "application/pdf")},
        headers=pro_headers,
    )

    assert r.status_code == 200
    assert "cv.pdf ready for analysis" in r.text
    assert "Your resume has been analyzed successfully" in r.text
    assert "Overall score: 82/100" in r.text
    assert "Excellent" in r.text
    assert "score-success" in r.text
    assert len(fake_llm.calls) == 1


def test_resume_page_fallback_score_reads_needs_improvement(client, fake_llm, pro_headers):
    fake_llm.error = LLMError("boom")

    r = client.post(
        "/coach/resume",
        files={"resume": ("cv.pdf", b"%PDF-1.4 fake", "application/pdf")},
        headers=pro_headers,
    )

    assert "Overall score: 65/100" in r.text
    assert "Needs Improvement" in r.text
    assert "score-warning" in r.text
