def _required(name: str, importance: str = "Critical", minimum: str = "Intermediate", weight: float = 5) -> dict:
    return {"skill_name": name, "importance": importance, "minimum_proficiency": minimum, "weight": weight}


def _salary(low: int, high: int) -> str:
    return f"${low:,} - ${high:,}"


CAREERS: list[dict] = [
    {
        "title": "Full Stack Developer",
        "industry_id": "tech-001",
        "description": "Builds both client-side and server-side software applications.",
        "salary_range": _salary(60000, 90000),
        "growth_outlook": "High Growth",
        "demand_score": 95,
        "required_skills": [
            _required("JavaScript", weight=8),
            _required("React", weight=7),
            _required("Node.js", weight=7),
            _required("SQL", "Important", weight=5),
            _required("Git", "Important", "Beginner", weight=4),
        ],
    },
    {
        "title": "Data Scientist",
        "industry_id": "tech-002",
        "description": "Analyzes and interprets complex digital data to help organizations make decisions.",
        "salary_range": _salary(80000, 110000),
        "growth_outlook": "High Growth",
        "demand_score": 98,
        "required_skills": [
            _required("Python", minimum="Advanced", weight=9),
            _required("SQL", weight=7),
            _required("Machine Learning", minimum="Advanced", weight=9),
            _required("Problem Solving", "Important", weight=5),
        ],
    },
    {
        "title": "DevOps Engineer",
        "industry_id": "tech-003",
        "description": (
            "Introduces processes, tools, and methodologies to balance needs throughout the "
            "software development life cycle."
        ),
        "salary_range": _salary(75000, 100000),
        "growth_outlook": "High Growth",
        "demand_score": 94,
        "required_skills": [
            _required("Docker", minimum="Advanced", weight=8),
            _required("Git", weight=6),
            _required("Python", "Important", weight=5),
            _required("Communication", "Nice-to-have", "Beginner", weight=3),
        ],
    },
    {
        "title": "UX Designer",
        "industry_id": "design-001",
        "description": "Designs products that are useful, easy to use, and delightful to interact with.",
        "salary_range": _salary(55000, 85000),
        "growth_outlook": "Growing",
        "demand_score": 88,
        "required_skills": [
            _required("Figma", weight=8),
            _required("User Research", weight=7),
            _required("Communication", "Important", weight=5),
            _required("Problem Solving", "Important", weight=5),
        ],
    },
    {
        "title": "Product Manager",
        "industry_id": "business-001",
        "description": (
            "Identifies the customer need and the larger business objectives that a product or "
            "feature will fulfill."
        ),
        "salary_range": _salary(70000, 100000),
        "growth_outlook": "Stable",
        "demand_score": 90,
        "required_skills": [
            _required("Product Strategy", minimum="Advanced", weight=8),
            _required("Communication", minimum="Advanced", weight=7),
            _required("Problem Solving", "Important", weight=6),
            _required("SQL", "Nice-to-have", "Beginner", weight=2),
        ],
    },
]
