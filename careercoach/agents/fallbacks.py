## Known-good results substituted when live generation fails
from types import MappingProxyType

from careercoach.agents.schemas import AnalysisResult, Roadmap, RoadmapNode

FALLBACK_ANALYSIS = AnalysisResult(
    overallScore=65,
    contactScore=75,
    experienceScore=70,
    improvements=[
        "Poor formatting and typos make the resume look unprofessional",
        "Lacks detail in key areas, such as responsibilities, achievements, and education",
        "Missing essential contact information",
    ],
    strengths=[
        "Highlights 10+ years of experience",
        "Mentions proficiency in key technologies like .NET Core, Angular, and Azure",
        "Indicates experience with Microservices and Team Lead roles",
    ],
    summary=(
        "The resume shows potential but suffers from poor formatting and a lack of "
        "detail in key areas. Clearer presentation and more quantifiable achievements "
        "are needed."
    ),
)


def _node(node_id: str, title: str, description: str, duration: str, category: str) -> RoadmapNode:
    return RoadmapNode(
        id=node_id,
        title=title,
        description=description,
        duration=duration,
        completed=False,
        category=category,
    )


REACT_DEVELOPER_ROADMAP = Roadmap(
    title="Full Stack React Developer Roadmap",
    description=(
        "This roadmap provides a structured path to becoming a proficient Full Stack "
        "React Developer. It covers essential front-end concepts with React, back-end "
        "technologies, databases, and deployment strategies."
    ),
    duration="12-18 Months",
    totalNodes=8,
    nodes=[
        _node("1", "React Component Lifecycle",
              "Grasp how components are created, updated, and unmounted...",
              "2-3 weeks", "foundation"),
        _node("2", "State Management (Redux/Context)",
              "Learn to manage application state effectively using Redux or React Context...",
              "3-4 weeks", "foundation"),
        _node("3", "React Hooks",
              "Master the use of React Hooks (useState, useEffect, useContext...)...",
              "2-3 weeks", "intermediate"),
        _node("4", "Frontend Testing (Jest/RTL)",
              "Write unit and integration tests for React components...",
              "2-3 weeks", "intermediate"),
        _node("5", "React Router",
              "Implement client-side routing to create single-page applications...",
              "1-2 weeks", "intermediate"),
        _node("6", "Backend Fundamentals (Node.js/Express)",
              "Learn Node.js for server-side JavaScript development...",
              "4-6 weeks", "advanced"),
        _node("7", "API Integration (REST/GraphQL)",
              "Build and consume REST and GraphQL APIs...",
              "3-4 weeks", "advanced"),
        _node("8", "Database Management",
              "Choose and implement database solutions like PostgreSQL, MySQL, or MongoDB...",
              "4-5 weeks", "specialization"),
    ],
)

PYTHON_DEVELOPER_ROADMAP = Roadmap(
    title="Python Full Stack Developer Roadmap",
    description=(
        "Comprehensive path to becoming a skilled Python developer covering web "
        "development, data science fundamentals, and deployment."
    ),
    duration="10-15 Months",
    totalNodes=8,
    nodes=[
        _node("1", "Python Fundamentals",
              "Master Python syntax, data types, control structures, and OOP concepts...",
              "3-4 weeks", "foundation"),
        _node("2", "Django/Flask Framework",
              "Learn web development with Django or Flask frameworks...",
              "4-6 weeks", "foundation"),
        _node("3", "Database Integration",
              "Work with SQL databases using SQLAlchemy or Django ORM...",
              "2-3 weeks", "intermediate"),
        _node("4", "REST API Development",
              "Build RESTful APIs using Django REST Framework or FastAPI...",
              "3-4 weeks", "intermediate"),
        _node("5", "Frontend Integration",
              "Connect Python backend with React, Vue, or vanilla JavaScript...",
              "2-3 weeks", "intermediate"),
        _node("6", "Testing & Documentation",
              "Implement unit testing with pytest and create comprehensive documentation...",
              "2-3 weeks", "advanced"),
        _node("7", "Data Science Basics",
              "Introduction to pandas, numpy, and data visualization...",
              "4-5 weeks", "advanced"),
        _node("8", "Deployment & DevOps",
              "Deploy applications using Docker, AWS, or Heroku...",
              "3-4 weeks", "specialization"),
    ],
)

# Roles offered in the picker; anything else goes through the model
PRESET_ROADMAPS = MappingProxyType({
    "react-developer": REACT_DEVELOPER_ROADMAP,
    "python-developer": PYTHON_DEVELOPER_ROADMAP,
})

FALLBACK_ROADMAP = REACT_DEVELOPER_ROADMAP
