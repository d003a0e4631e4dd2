import click
from flask import Blueprint
from ride_service.extensions import db
from ride_service.models.passenger import Passenger

cli_bp = Blueprint('cli', __name__, cli_group=None)

DEMO_PASSENGERS = [
    {'name': 'David Cohen', 'lat': 32.0645, 'lng': 34.772, 'type': 'Home -> Work', 'address': 'Rothschild Blvd 10, TA'},
    {'name': 'Sarah Levy', 'lat': 32.078, 'lng': 34.7745, 'type': 'Home -> Work', 'address': 'Dizengoff 50, TA'},
    {'name': 'Yossi Ben-Ari', 'lat': 32.063, 'lng': 34.77, 'type': 'Work -> Home', 'address': 'Allenby 99, TA'},
    {'name': 'Rachel Green', 'lat': 32.071, 'lng': 34.773, 'type': 'Home -> Work', 'address': 'King George 20, TA'},
    {'name': 'Omer Adam', 'lat': 32.058, 'lng': 34.7705, 'type': 'Work -> Home', 'address': 'Florentin 15, TA'},
]


@cli_bp.cli.command('init-db')
def init_db():
    """Create the passengers and transfers tables."""
    db.create_all()
    click.echo('Database tables created')


@cli_bp.cli.command('seed-demo')
@click.option('--owner', required=True, help='Owner id the demo passengers belong to.')
def seed_demo(owner):
    """Insert the demo passenger list for OWNER."""
    db.session.add_all(Passenger(owner_id=owner, **row) for row in DEMO_PASSENGERS)
    db.session.commit()
    click.echo(f'Seeded {len(DEMO_PASSENGERS)} passengers for {owner}')
