"""Sample catalog loaded into in-memory storage for development and demos."""

from skillpath.modules.analytics.interface import Analytics, DailyActivity
from skillpath.modules.assessment.interface import AssessmentQuestion
from skillpath.modules.catalog.schemas import (
    Course,
    LearningPath,
    Project,
    SyllabusWeek,
    UserProgress,
)
from skillpath.shared.models import Category, CourseProvider, DifficultyLevel


def _course(
    course_id: str,
    title: str,
    description: str,
    provider: CourseProvider,
    category: Category,
    difficulty: DifficultyLevel,
    duration: str,
    rating: float,
    review_count: int,
    instructor: str,
    skills: list[str],
    weeks: list[tuple[str, list[str]]],
    price: float | None = None,
) -> Course:
    return Course(
        id=course_id,
        title=title,
        description=description,
        provider=provider,
        category=category,
        difficulty=difficulty,
        duration=duration,
        rating=rating,
        review_count=review_count,
        instructor=instructor,
        thumbnail_url=f"/images/courses/{course_id}.jpg",
        syllabus=[
            SyllabusWeek(week=index, title=week_title, topics=topics, duration="3 hours")
            for index, (week_title, topics) in enumerate(weeks, start=1)
        ],
        skills=skills,
        price=price,
    )


SAMPLE_COURSES: list[Course] = [
    _course(
        "1", "Web Development Fundamentals",
        "Build your first websites with semantic HTML, modern CSS and JavaScript.",
        CourseProvider.COURSERA, Category.DEVELOPMENT, DifficultyLevel.BEGINNER,
        "6 weeks", 4.7, 12840, "Dana Whitfield",
        ["HTML", "CSS", "JavaScript"],
        [("HTML Basics", ["Elements", "Forms"]), ("Styling", ["Selectors", "Flexbox"])],
    ),
    _course(
        "2", "React - The Complete Guide",
        "Components, hooks, routing and state management for single-page apps.",
        CourseProvider.UDEMY, Category.DEVELOPMENT, DifficultyLevel.INTERMEDIATE,
        "40 hours", 4.8, 203311, "Max Kessler",
        ["React", "JavaScript", "Redux"],
        [("Components", ["JSX", "Props"]), ("Hooks", ["useState", "useEffect"])],
        price=84.99,
    ),
    _course(
        "3", "UI/UX Design Essentials",
        "User research, wireframing and prototyping for digital products.",
        CourseProvider.COURSERA, Category.DESIGN, DifficultyLevel.BEGINNER,
        "8 weeks", 4.6, 8420, "Priya Raman",
        ["Figma", "Wireframing", "User Research"],
        [("Research", ["Interviews", "Personas"]), ("Prototyping", ["Figma", "Testing"])],
    ),
    _course(
        "4", "Machine Learning Specialization",
        "Supervised and unsupervised learning with practical Python labs.",
        CourseProvider.COURSERA, Category.DATA_SCIENCE, DifficultyLevel.INTERMEDIATE,
        "3 months", 4.9, 31205, "Andrea Ng-Lowe",
        ["Python", "Machine Learning", "NumPy"],
        [("Regression", ["Linear", "Logistic"]), ("Neural Networks", ["Layers", "Training"])],
    ),
    _course(
        "5", "Digital Marketing Masterclass",
        "SEO, content strategy, paid social and analytics in one course.",
        CourseProvider.UDEMY, Category.MARKETING, DifficultyLevel.BEGINNER,
        "23 hours", 4.5, 45102, "Leo Martins",
        ["SEO", "Content Marketing", "Google Analytics"],
        [("SEO", ["Keywords", "On-page"]), ("Social", ["Campaigns", "Metrics"])],
        price=74.99,
    ),
    _course(
        "6", "Business Strategy",
        "Competitive analysis and strategic planning frameworks.",
        CourseProvider.COURSERA, Category.BUSINESS, DifficultyLevel.ADVANCED,
        "5 weeks", 4.4, 5210, "Helen Ortiz",
        ["Strategy", "Competitive Analysis"],
        [("Frameworks", ["Five Forces", "SWOT"]), ("Execution", ["OKRs", "Roadmaps"])],
    ),
    _course(
        "7", "Node.js API Development",
        "Design and build REST APIs with Node.js, Express and PostgreSQL.",
        CourseProvider.UDEMY, Category.DEVELOPMENT, DifficultyLevel.INTERMEDIATE,
        "28 hours", 4.6, 38911, "Sam Okafor",
        ["Node.js", "Express", "REST APIs"],
        [("Express", ["Routing", "Middleware"]), ("Data", ["SQL", "Migrations"])],
        price=64.99,
    ),
    _course(
        "8", "Learning How to Learn",
        "Evidence-based techniques for focus, memory and deliberate practice.",
        CourseProvider.COURSERA, Category.PERSONAL_DEVELOPMENT, DifficultyLevel.BEGINNER,
        "4 weeks", 4.8, 98214, "Barbara Chen",
        ["Focus", "Memory Techniques"],
        [("Focus", ["Pomodoro", "Chunking"]), ("Memory", ["Spaced Repetition"])],
    ),
]


SAMPLE_LEARNING_PATHS: list[LearningPath] = [
    LearningPath(
        id="path-1",
        title="Full-Stack Web Developer",
        description="From first HTML page to deployed full-stack applications.",
        category=Category.DEVELOPMENT,
        difficulty=DifficultyLevel.BEGINNER,
        estimated_duration="6 months",
        courses=["1", "2", "7"],
        skills=["HTML", "CSS", "JavaScript", "React", "Node.js"],
    ),
    LearningPath(
        id="path-2",
        title="Data Scientist",
        description="Statistics, Python and machine learning for data-driven decisions.",
        category=Category.DATA_SCIENCE,
        difficulty=DifficultyLevel.INTERMEDIATE,
        estimated_duration="8 months",
        courses=["4"],
        skills=["Python", "Machine Learning", "NumPy"],
    ),
    LearningPath(
        id="path-3",
        title="Product Designer",
        description="Research-led interface design and prototyping.",
        category=Category.DESIGN,
        difficulty=DifficultyLevel.BEGINNER,
        estimated_duration="4 months",
        courses=["3"],
        skills=["Figma", "Wireframing", "User Research"],
    ),
]


SAMPLE_QUESTIONS: list[AssessmentQuestion] = [
    AssessmentQuestion(
        id="q1",
        question="Which HTML element is used for the largest heading?",
        options=("<head>", "<h1>", "<h6>", "<header>"),
        correct_answer=1,
        category=Category.DEVELOPMENT,
        difficulty=DifficultyLevel.BEGINNER,
    ),
    AssessmentQuestion(
        id="q2",
        question="What does a JavaScript Promise represent?",
        options=(
            "A synchronous value",
            "The eventual result of an asynchronous operation",
            "A CSS animation",
            "A database connection",
        ),
        correct_answer=1,
        category=Category.DEVELOPMENT,
        difficulty=DifficultyLevel.INTERMEDIATE,
    ),
    AssessmentQuestion(
        id="q3",
        question="What is the main purpose of a wireframe?",
        options=(
            "Final visual polish",
            "Defining layout and structure",
            "Writing production code",
            "Running A/B tests",
        ),
        correct_answer=1,
        category=Category.DESIGN,
        difficulty=DifficultyLevel.BEGINNER,
    ),
    AssessmentQuestion(
        id="q4",
        question="Which principle groups related items close together?",
        options=("Contrast", "Proximity", "Repetition", "Alignment"),
        correct_answer=1,
        category=Category.DESIGN,
        difficulty=DifficultyLevel.INTERMEDIATE,
    ),
    AssessmentQuestion(
        id="q5",
        question="What does ROI stand for?",
        options=(
            "Rate of Inflation",
            "Return on Investment",
            "Risk of Insolvency",
            "Revenue over Income",
        ),
        correct_answer=1,
        category=Category.BUSINESS,
        difficulty=DifficultyLevel.BEGINNER,
    ),
    AssessmentQuestion(
        id="q6",
        question="Which metric measures the middle value of a sorted dataset?",
        options=("Mean", "Mode", "Median", "Range"),
        correct_answer=2,
        category=Category.DATA_SCIENCE,
        difficulty=DifficultyLevel.BEGINNER,
    ),
    AssessmentQuestion(
        id="q7",
        question="What is overfitting?",
        options=(
            "A model that is too simple",
            "A model that memorizes training data and generalizes poorly",
            "A model with too little data",
            "A model trained for too few epochs",
        ),
        correct_answer=1,
        category=Category.DATA_SCIENCE,
        difficulty=DifficultyLevel.ADVANCED,
    ),
    AssessmentQuestion(
        id="q8",
        question="What does SEO primarily aim to improve?",
        options=(
            "Email open rates",
            "Organic search visibility",
            "Paid ad spend",
            "Server response time",
        ),
        correct_answer=1,
        category=Category.MARKETING,
        difficulty=DifficultyLevel.BEGINNER,
    ),
]


SAMPLE_PROJECTS: list[Project] = [
    Project(
        id="proj-1",
        title="Personal Portfolio Site",
        description="A responsive portfolio showcasing your projects and skills.",
        difficulty=DifficultyLevel.BEGINNER,
        estimated_time="10 hours",
        skills=["HTML", "CSS", "JavaScript"],
        requirements=["Responsive layout", "Project gallery", "Contact form"],
        learning_outcomes=["Semantic markup", "Responsive design"],
        course_id="1",
    ),
    Project(
        id="proj-2",
        title="Task Board with React",
        description="A drag-and-drop kanban board with persistent state.",
        difficulty=DifficultyLevel.INTERMEDIATE,
        estimated_time="20 hours",
        skills=["React", "JavaScript"],
        requirements=["Drag and drop", "Local persistence", "Filtering"],
        learning_outcomes=["Component design", "State management"],
        course_id="2",
    ),
    Project(
        id="proj-3",
        title="Housing Price Predictor",
        description="Train and evaluate a regression model on housing data.",
        difficulty=DifficultyLevel.ADVANCED,
        estimated_time="30 hours",
        skills=["Python", "Machine Learning"],
        requirements=["Data cleaning", "Feature engineering", "Model evaluation"],
        learning_outcomes=["Regression", "Cross-validation"],
        course_id="4",
    ),
    Project(
        id="proj-4",
        title="Design System Starter",
        description="A small component library with documented tokens.",
        difficulty=DifficultyLevel.INTERMEDIATE,
        estimated_time="15 hours",
        skills=["Figma", "Wireframing"],
        requirements=["Color and type tokens", "Five core components"],
        learning_outcomes=["Visual consistency", "Design documentation"],
        course_id="3",
    ),
]


SAMPLE_PROGRESS: list[UserProgress] = [
    UserProgress(
        id="progress-1",
        course_id="1",
        completed_modules=[1, 2],
        progress_percent=65,
        started_at="2024-01-08T09:00:00+00:00",
        last_accessed_at="2024-02-02T18:30:00+00:00",
        time_spent_minutes=420,
    ),
    UserProgress(
        id="progress-2",
        course_id="3",
        completed_modules=[1],
        progress_percent=30,
        started_at="2024-01-20T10:00:00+00:00",
        last_accessed_at="2024-01-31T20:15:00+00:00",
        time_spent_minutes=180,
    ),
]


SAMPLE_ANALYTICS = Analytics(
    total_courses_started=4,
    total_courses_completed=1,
    total_time_spent_minutes=1260,
    average_progress=48,
    skills_acquired=("HTML", "CSS", "Figma", "JavaScript"),
    weekly_activity=(
        DailyActivity(day="Mon", minutes=45),
        DailyActivity(day="Tue", minutes=30),
        DailyActivity(day="Wed", minutes=60),
        DailyActivity(day="Thu", minutes=0),
        DailyActivity(day="Fri", minutes=90),
        DailyActivity(day="Sat", minutes=120),
        DailyActivity(day="Sun", minutes=15),
    ),
    category_distribution={"development": 45, "design": 30, "data-science": 15, "marketing": 10},
    streak_days=5,
)
