from careercoach.agents.coercion import Coerced, coerce
from careercoach.agents.fallbacks import FALLBACK_ANALYSIS
from careercoach.agents.llm.base import LLMClient
from careercoach.agents.llm.client import get_llm_client
from careercoach.agents.schemas import AnalysisResult
from careercoach.settings import settings


SYSTEM_RESUME_ANALYZER = """You are an expert ATS (Applicant Tracking System) resume analyzer.
Analyze the resume file you are given and provide a detailed assessment.

You must return ONLY valid JSON (no markdown, no code fences, no commentary).
"""


def describe_resume(file_b64: str, file_name: str) -> str:
    # No text extraction: the model only sees the file name and payload size
    return f"""Resume file: {file_name}

This is a sample resume analysis. In a production environment, you would:
1. Extract text from the PDF
2. Use OCR for scanned documents
3. Parse the extracted text for better analysis

The file has been uploaded as: {file_name}
Base64 content length: {len(file_b64)} characters"""


def build_analysis_prompt(resume_content: str, file_name: str) -> str:
    return f"""
Resume File: {file_name}
Resume Content: {resume_content}

Please provide your analysis in the following EXACT JSON format (no additional text, no markdown formatting):
{{
  "overallScore": number (0-100),
  "contactScore": number (0-100),
  "experienceScore": number (0-100),
  "improvements": ["specific improvement suggestion 1", "specific improvement suggestion 2", "specific improvement suggestion 3"],
  "strengths": ["identified strength 1", "identified strength 2", "identified strength 3"],
  "summary": "brief overall summary of the resume in one paragraph"
}}

Evaluation Criteria:
1. ATS Compatibility (30%):
   - Keywords relevant to the job/industry
   - Standard section headers (Experience, Education, Skills)
   - Simple, readable formatting
   - Proper use of bullet points

2. Contact Information (20%):
   - Full name clearly visible
   - Professional email address
   - Phone number
   - Location (city, state)
   - LinkedIn profile or portfolio URL

3. Experience Section (25%):
   - Clear job titles and company names
   - Employment dates
   - Quantifiable achievements (numbers, percentages, dollar amounts)
   - Action verbs and impact statements
   - Relevant responsibilities

4. Skills & Keywords (15%):
   - Technical skills relevant to target role
   - Industry-specific terminology
   - Certifications and qualifications
   - Programming languages/tools if applicable

5. Overall Quality (10%):
   - Professional appearance
   - Grammar and spelling
   - Consistent formatting
   - Appropriate length (1-2 pages)

Rules:
- Every score is an integer from 0 to 100.
- Exactly 3 improvements and exactly 3 strengths, each one short sentence.
- Provide specific, actionable feedback and highlight genuine strengths.
- Be constructive but honest in your assessment.
""".strip()


def request_analysis(llm: LLMClient, file_b64: str, file_name: str) -> str:
    """Single provider call; returns the raw completion text or raises LLMError."""
    prompt = build_analysis_prompt(describe_resume(file_b64, file_name), file_name)
    return llm.generate_text(
        system=SYSTEM_RESUME_ANALYZER,
        user=prompt,
        temperature=settings.analysis_temperature,
    )


def analyze_resume(file_b64: str, file_name: str, llm: LLMClient | None = None) -> Coerced[AnalysisResult]:
    llm = llm or get_llm_client()
    return coerce(
        AnalysisResult,
        lambda: request_analysis(llm, file_b64, file_name),
        FALLBACK_ANALYSIS,
    )
