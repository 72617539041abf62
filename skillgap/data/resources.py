RESOURCES: list[dict] = [
    {
        "skill_name": "JavaScript",
        "title": "The Complete JavaScript Course 2024: From Zero to Expert!",
        "provider": "Udemy",
        "url": "https://www.udemy.com/course/the-complete-javascript-course/",
        "type": "Course",
        "difficulty": "Beginner",
        "duration": "69 hours",
        "is_free": False,
        "cost_amount": 19.99,
        "rating": 4.8,
        "review_count": 150000,
    },
    {
        "skill_name": "JavaScript",
        "title": "JavaScript Crash Course for Beginners",
        "provider": "YouTube",
        "url": "https://www.youtube.com/watch?v=hdI2bqOjy3c",
        "type": "Video",
        "difficulty": "Beginner",
        "duration": "1.5 hours",
        "is_free": True,
        "cost_amount": 0,
        "rating": 4.9,
        "review_count": 50000,
    },
    {
        "skill_name": "React",
        "title": "React - The Complete Guide 2024",
        "provider": "Udemy",
        "url": "https://www.udemy.com/course/react-the-complete-guide-incl-redux/",
        "type": "Course",
        "difficulty": "Intermediate",
        "duration": "40 hours",
        "is_free": False,
        "cost_amount": 19.99,
        "rating": 4.7,
        "review_count": 180000,
    },
    {
        "skill_name": "Node.js",
        "title": "Node.js API Masterclass (with Express & MongoDB)",
        "provider": "Udemy",
        "url": "https://www.udemy.com/course/nodejs-api-masterclass/",
        "type": "Course",
        "difficulty": "Advanced",
        "duration": "12 hours",
        "is_free": False,
        "cost_amount": 19.99,
        "rating": 4.7,
        "review_count": 20000,
    },
    {
        "skill_name": "Python",
        "title": "Python 101",
        "provider": "Coursera",
        "url": "https://www.coursera.org/learn/python",
        "type": "Course",
        "difficulty": "Beginner",
        "duration": "20 hours",
        "is_free": True,
        "cost_amount": 0,
        "rating": 4.8,
        "review_count": 500000,
    },
    {
        "skill_name": "Data Science",
        "title": "Data Science Methodology",
        "provider": "Coursera",
        "url": "https://www.coursera.org/learn/data-science-methodology",
        "type": "Course",
        "difficulty": "Intermediate",
        "duration": "10 hours",
        "is_free": False,
        "cost_amount": 49,
        "rating": 4.6,
        "review_count": 30000,
    },
    {
        "skill_name": "Git",
        "title": "Git & GitHub Crash Course For Beginners",
        "provider": "YouTube",
        "url": "https://www.youtube.com/watch?v=SWYqp7iY_Tc",
        "type": "Video",
        "difficulty": "Beginner",
        "duration": "1 hour",
        "is_free": True,
        "cost_amount": 0,
        "rating": 4.9,
        "review_count": 100000,
    },
]
