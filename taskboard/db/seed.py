from sqlalchemy.orm import Session

from taskboard.db.models import Board, BoardStatus, Task, SubTask


def _add_board(db: Session, name: str, description: str, status_names: list[str]):
    board = Board(name=name, description=description)
    board.statuses = [BoardStatus(name=status_name, position=i) for i, status_name in enumerate(status_names)]
    db.add(board)
    db.flush()  # to get IDs
    return board, board.statuses


def _add_task(db: Session, status: BoardStatus, title: str, position: int, description=None, subtasks=()):
    task = Task(board_status_id=status.id, title=title, description=description, position=position)
    db.add(task)
    db.flush()
    db.add_all(
        SubTask(task_id=task.id, description=text, is_completed=done)
        for text, done in subtasks
    )
    return task


def clear_all(db: Session):
    for model in (SubTask, Task, BoardStatus, Board):
        db.query(model).delete()


def seed_demo_boards(db: Session):
    clear_all(db)

    # Board 1: Mobile App Redesign
    mobile, (backlog, in_progress, in_review, done) = _add_board(
        db,
        "Mobile App Redesign",
        "Q1 initiative to modernize the iOS and Android apps",
        ["Backlog", "In Progress", "In Review", "Done"],
    )

    _add_task(
        db, in_progress, "Implement biometric authentication", 0,
        "Add Face ID and fingerprint login options for faster access",
        subtasks=[
            ("Research iOS Face ID API", True),
            ("Research Android fingerprint API", True),
            ("Implement iOS biometric flow", False),
            ("Implement Android biometric flow", False),
            ("Add fallback to PIN entry", False),
        ],
    )
    _add_task(
        db, in_review, "Redesign onboarding flow", 0,
        "Simplify the 7-step onboarding to 3 steps with progress indicator",
        subtasks=[
            ("Create new wireframes", True),
            ("Get design approval", True),
            ("Implement UI components", True),
            ("Write unit tests", False),
        ],
    )
    _add_task(db, backlog, "Add dark mode support", 0, "Implement system-aware dark mode with manual toggle option")
    _add_task(db, backlog, "Optimize image loading", 1, "Implement lazy loading and WebP format for faster load times")
    _add_task(db, backlog, "Add push notification preferences", 2)
    _add_task(db, done, "Update app icons and splash screen", 0, "New branding assets from marketing team")
    _add_task(db, done, "Migrate to React Native 0.73", 1)

    # Board 2: Marketing Website
    website, (todo, doing, qa, complete) = _add_board(
        db,
        "Marketing Website",
        "Company website refresh and SEO improvements",
        ["To Do", "Doing", "QA", "Complete"],
    )

    _add_task(
        db, doing, "Build new pricing page", 0,
        "Interactive pricing calculator with feature comparison table",
        subtasks=[
            ("Design pricing tiers layout", True),
            ("Build comparison table component", True),
            ("Implement pricing calculator", False),
            ("Add Stripe checkout integration", False),
        ],
    )
    _add_task(
        db, qa, "Migrate blog to new CMS", 0,
        "Move 50+ articles from WordPress to Sanity",
        subtasks=[
            ("Set up Sanity schema", True),
            ("Write migration script", True),
            ("Migrate all posts", True),
            ("Verify redirects working", False),
            ("Update internal links", False),
        ],
    )
    _add_task(db, todo, "Add customer testimonials section", 0, "Carousel with quotes, photos, and company logos")
    _add_task(db, todo, "Implement site search", 1, "Algolia-powered search across docs and blog")
    _add_task(db, todo, "Create careers page", 2)
    _add_task(db, complete, "Redesign homepage hero", 0, "New animated hero with product demo video")
    _add_task(db, complete, "Fix mobile navigation menu", 1)
    _add_task(db, complete, "Add cookie consent banner", 2)

    db.commit()
    return [mobile, website]


if __name__ == "__main__":
    from taskboard.config import get_settings
    from taskboard.db.session import Database

    database = Database.from_settings(get_settings())
    with database.SessionLocal() as db:
        boards = seed_demo_boards(db)
        print(f"Seeded {len(boards)} boards")
    database.dispose()
