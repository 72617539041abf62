SKILLS: list[dict] = [
    {"name": "JavaScript", "category": "Technical", "subcategory": "Programming", "demand_score": 95},
    {"name": "Python", "category": "Technical", "subcategory": "Programming", "demand_score": 93},
    {"name": "Git", "category": "Tools", "subcategory": "Version Control", "demand_score": 92},
    {"name": "React", "category": "Technical", "subcategory": "Frontend", "demand_score": 90},
    {"name": "Problem Solving", "category": "Soft Skills", "subcategory": "Critical Thinking", "demand_score": 89},
    {"name": "SQL", "category": "Technical", "subcategory": "Database", "demand_score": 88},
    {"name": "Communication", "category": "Soft Skills", "subcategory": "Interpersonal", "demand_score": 87},
    {"name": "Node.js", "category": "Technical", "subcategory": "Backend", "demand_score": 85},
    {"name": "Machine Learning", "category": "Technical", "subcategory": "AI/ML", "demand_score": 82},
    {"name": "Docker", "category": "Tools", "subcategory": "DevOps", "demand_score": 78},
    {"name": "Figma", "category": "Tools", "subcategory": "Design", "demand_score": 74},
    {"name": "User Research", "category": "Domain Knowledge", "subcategory": "Design", "demand_score": 70},
    {"name": "Product Strategy", "category": "Domain Knowledge", "subcategory": "Product", "demand_score": 68},
]
