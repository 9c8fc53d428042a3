# fitclub_server/core/seed.py

from sqlalchemy.orm import Session
from fitclub_server.core.security import get_password_hash
from fitclub_server.models import AppConfig, Challenge, Exercise, User, Workout


DEFAULT_CONFIG = {
    "home_banner": "https://picsum.photos/seed/fitness/800/400",
    "motivational_quote": "Disciplina é a ponte entre metas e realizações.",
}

SAMPLE_WORKOUTS = [
    {
        "name": "Treino A - Superiores",
        "type": "A",
        "category": "Gym",
        "video_url": "https://www.youtube.com/embed/IODxDxX7oi4",
        "duration": "45 min",
        "series": "4x12",
        "description": "Peito, ombros e tríceps.",
        "tips": "Controle a descida em todas as repetições.",
        "exercises": [
            {"name": "Supino reto", "description": "Barra na linha do peito.", "tips": "Escápulas retraídas."},
            {"name": "Desenvolvimento", "description": "Halteres acima da cabeça.", "tips": "Não trave os cotovelos."},
            {"name": "Tríceps corda", "description": "Extensão na polia.", "tips": "Cotovelos fixos."},
        ],
    },
    {
        "name": "Treino B - Inferiores",
        "type": "B",
        "category": "Gym",
        "video_url": "https://www.youtube.com/embed/aclHkVaku9U",
        "duration": "50 min",
        "series": "4x10",
        "description": "Quadríceps, posteriores e glúteos.",
        "tips": "Mantenha o core ativado.",
        "exercises": [
            {"name": "Agachamento livre", "description": "Descida até a paralela.", "tips": "Joelhos alinhados com os pés."},
            {"name": "Stiff", "description": "Flexão de quadril com barra.", "tips": "Coluna neutra."},
        ],
    },
    {
        "name": "Treino C - Funcional em casa",
        "type": "C",
        "category": "Home",
        "video_url": "https://www.youtube.com/embed/ml6cT4AZdqI",
        "duration": "30 min",
        "series": "3 rounds",
        "description": "Circuito de corpo inteiro sem equipamentos.",
        "tips": "Descanse 30 segundos entre exercícios.",
        "exercises": [
            {"name": "Burpee", "description": "Agachamento, prancha e salto.", "tips": "Ritmo constante."},
            {"name": "Prancha", "description": "Isometria de 40 segundos.", "tips": "Quadril alinhado."},
        ],
    },
]

SAMPLE_CHALLENGES = [
    {
        "title": "30 dias de hidratação",
        "description": "Beba 3 litros de água por dia durante 30 dias.",
        "image_url": "https://picsum.photos/seed/challenge/800/600",
        "duration_days": 30,
    },
    {
        "title": "Semana sem faltas",
        "description": "Complete um treino por dia durante 7 dias.",
        "image_url": "https://picsum.photos/seed/streak/800/600",
        "duration_days": 7,
    },
]


def seed_admin(db: Session, settings) -> User | None:
    """
    Creates the administrator account from ADMIN_EMAIL / ADMIN_PASSWORD.
    Nothing is created when either variable is unset or the email already exists.
    """
    email = (settings.admin_email or "").strip().lower()
    if not email or not settings.admin_password:
        return None
    if db.query(User).filter(User.email == email).first():
        return None

    admin = User(
        email=email,
        password=get_password_hash(settings.admin_password),
        name=settings.admin_name,
        role="admin",
    )
    db.add(admin)
    db.commit()
    print(f"[seed] created admin account {email}")
    return admin


def seed_content(db: Session):
    if db.query(Workout).count() == 0:
        for index, data in enumerate(SAMPLE_WORKOUTS):
            data = dict(data)
            exercises = data.pop("exercises")
            workout = Workout(order_index=index, **data)
            db.add(workout)
            db.flush()
            for ex_index, ex in enumerate(exercises):
                db.add(Exercise(workout_id=workout.id, order_index=ex_index, **ex))
        print(f"[seed] inserted {len(SAMPLE_WORKOUTS)} sample workouts")

    if db.query(Challenge).count() == 0:
        for index, data in enumerate(SAMPLE_CHALLENGES):
            db.add(Challenge(order_index=index, **data))

    existing_keys = {row.key for row in db.query(AppConfig.key).all()}
    for key, value in DEFAULT_CONFIG.items():
        if key not in existing_keys:
            db.add(AppConfig(key=key, value=value))

    db.commit()


def seed_all(db: Session, settings):
    seed_admin(db, settings)
    seed_content(db)
