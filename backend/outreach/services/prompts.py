"""Prompt templates for the AI endpoints.

Each builder returns ``(system, prompt)``; ``system`` may be ``None``.
"""
import re

from outreach.schemas.ai import OutreachProfile
from outreach.schemas.company import CompanyCreate
from outreach.schemas.job import JobCreate

_EMAIL_LINE_RE = re.compile(r"EMAIL:\s*(\S+)", re.IGNORECASE)
_NAME_LINE_RE = re.compile(r"NAME:\s*([^\n]+)", re.IGNORECASE)


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def _company_name(job: JobCreate) -> str:
    return (job.company.name if job.company else None) or "Unknown"


def analyze_job(job: JobCreate, profile: OutreachProfile) -> tuple[str, str]:
    system = (
        f"You are a Senior Technical Strategist for {profile.company_name}.\n"
        f"Your Company's Services:\n{_bullets(profile.services)}"
    )
    prompt = (
        f"Job Title: {job.title}\n"
        f"Job Description: {job.description[:1500]}\n"
        "Analyze this job. Return JSON with keys: score (number 0-10), "
        'recommendation ("CONTACT" or "SKIP"), reasoning (string), '
        "painPoints (array of strings), matchingSkills (array of strings)."
    )
    return system, prompt


def generate_job_email(job: JobCreate, profile: OutreachProfile) -> tuple[str, str]:
    analysis_context = ""
    if job.analysis:
        analysis_context = (
            f"Analysis Score: {job.analysis.score}/10. "
            f"Pain Points: {', '.join(job.analysis.pain_points)}."
        )
    if job.analysis and job.analysis.matching_skills:
        matching_skills = ", ".join(job.analysis.matching_skills)
    else:
        matching_skills = ", ".join(profile.services[:3])

    system = f"""You are a Senior Engineering Partner at {profile.company_name} with 15 years of experience.
We specialize in: {', '.join(profile.services)}.

CONTEXT: You are contacting a hiring manager/founder about a specific open role ("{job.title}").

GOAL: Position our team as the immediate solution to the vacancy. Show we can start delivering value faster than a full-time hire.

STRUCTURE:
1. Hook: "I saw you're looking for a {job.title}..."
2. The Problem: Acknowledge the specific technical challenge mentioned in their job post.
3. Our Value (Bulleted): List 3 specific ways we hit the ground running using our matching skills.
4. Soft CTA: "Open to a brief chat to see if we're a fit?"

FORMATTING RULES:
- Use \\n\\n for paragraph breaks.
- Use " - " for bullet points.
- Keep it under 150 words.
- Tone: Professional, Efficient, Helpful."""

    prompt = f"""JOB TITLE: {job.title}
COMPANY: {_company_name(job)}
JOB DESCRIPTION SNIPPET: {job.description[:500]}...

ANALYSIS CONTEXT: {analysis_context}
MATCHING SKILLS: {matching_skills}

Draft a concise, well-formatted email.

SUBJECT LINE:
- Internal style. Lowercase.
- E.g. "re: {job.title}", "candidate for {job.title}", "question about {job.title}"

Return JSON: {{"subject": "string", "body": "string"}}"""
    return system, prompt


def find_email(job: JobCreate) -> tuple[None, str]:
    return None, (
        f"Find contact email for {_company_name(job)}. Job: {job.title}. "
        "Answer with two lines: EMAIL: <address> and NAME: <person>."
    )


def parse_found_email(text: str) -> tuple[str | None, str | None]:
    """Pull ``EMAIL:`` and ``NAME:`` values out of free text.

    An email without ``@`` or reading "not found" is discarded.
    """
    email_match = _EMAIL_LINE_RE.search(text or "")
    name_match = _NAME_LINE_RE.search(text or "")
    email = email_match.group(1).strip() if email_match else None
    name = name_match.group(1).strip() if name_match else None
    if email and ("not found" in email.lower() or "@" not in email):
        email = None
    return email, name


def analyze_company(company: CompanyCreate, profile: OutreachProfile) -> tuple[None, str]:
    return None, f"""Analyze the company "{company.name}" (Website: {company.website}).

MY COMPANY PROFILE:
Name: {profile.company_name}
Description: {profile.company_description}
Services:
{_bullets(profile.services)}

Task:
1. Summarize their business operations (what they do).
2. Identify 3 potential operational pain points or technical needs based on their industry/website.
3. Find their social media links (LinkedIn, Twitter, Github, etc).
4. Service Mapping: Explicitly select 2-3 of MY SERVICES (from the list above) that are best suited to solve their identified pain points.
5. Recommend a sales approach strategy.

RETURN THE RESULT IN RAW JSON FORMAT ONLY. DO NOT USE MARKDOWN.
Structure:
{{
    "summary": "string",
    "painPoints": ["string"],
    "socialLinks": [{{"platform": "string", "url": "string"}}],
    "matchingSkills": ["string"],
    "recommendedApproach": "string"
}}"""


def find_decision_maker(company: CompanyCreate) -> tuple[None, str]:
    return None, f"""Find decision makers for "{company.name}" (Website: {company.website}).
Looking for up to 3 people in roles like: CTO, Founder, Head of Engineering, Product Manager, or IT Director.
Also find a general company contact email (like contact@, hello@, jobs@).

Task:
1. Search for specific people in leadership.
2. Search for their specific work emails if available.
3. Search for their LinkedIn profile URLs.
4. Search for a generic company email.

RETURN THE RESULT IN RAW JSON FORMAT ONLY. DO NOT USE MARKDOWN.
Structure:
{{
    "contacts": [
        {{"name": "string", "role": "string", "email": "string", "linkedin": "string (url)"}}
    ],
    "generalEmail": "string"
}}
If fields are not found, leave them as empty string."""


def generate_company_email(
    company: CompanyCreate,
    profile: OutreachProfile,
    contact_name: str | None = None,
    contact_role: str | None = None,
) -> tuple[str, str]:
    recipient_name = contact_name or "Team"
    recipient_info = f"{contact_name} ({contact_role})" if contact_name else "Team"
    analysis = company.analysis
    matching_skills = ", ".join(analysis.matching_skills) if analysis else ""
    approach = (analysis.recommended_approach if analysis else "") or "Consultative problem solving"
    summary = (analysis.summary if analysis else "") or "Unknown"
    pain_points = (", ".join(analysis.pain_points) if analysis else "") or "Scaling technical systems"

    system = f"""You are a Strategic Account Executive at {profile.company_name}.

ABOUT US: {profile.company_description}
OUR SERVICES: {', '.join(profile.services)}.

CONTEXT: You are sending a cold email to {company.name}.

GOAL: Pitch our services as a solution to their challenges using the analysis data.

STRUCTURE:
1. Subject: Intriguing, Short, Lowercase. (e.g. "thoughts on [topic]", "question").
2. Greeting: "Hi {recipient_name},"
3. Observation: Start with something specific about their company.
4. Insight: Mention the recommended approach: {approach}.
5. Solution (Bullet Points):
   - Link their pain points directly to the relevant services to pitch.
   - You MUST mention "{profile.company_name}" in the body (e.g. "At {profile.company_name}, we help...").
   - You MUST explicitly mention our specific services that solve their pain.
6. The Ask: "Worth a brief exchange?"
7. Signature: "Best,\\n[Your Name]"

FORMATTING RULES:
- Use \\n\\n for paragraph breaks.
- Use " - " for bullet points.
- Short sentences.
- NO fluff ("I hope this email finds you well")."""

    prompt = f"""RECIPIENT: {recipient_info}
COMPANY: {company.name}
WEBSITE: {company.website}

COMPANY SUMMARY: {summary}
IDENTIFIED PAIN POINTS: {pain_points}
RELEVANT SERVICES TO PITCH: {matching_skills}
RECOMMENDED STRATEGY: {approach}

Draft a high-impact, easy-to-read email.
Use the RECOMMENDED STRATEGY to frame the pitch.

Output JSON: {{"subject": "string", "body": "string"}}"""
    return system, prompt
