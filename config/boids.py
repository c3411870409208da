"""Configuration for the 2D boids flocking simulation."""

WINDOW = {
    "width": 800,
    "height": 500,
    "title": "Boids",
    "fps": 60
}

BOIDS = {
    "count": 150,
    "crowding_radius": 10.0,    # Closer than this and boids push apart
    "local_radius": 60.0,       # How far boids can see neighbors (must exceed crowding_radius)
    "repulsion_factor": 0.05,   # Avoid crowding
    "adhesion_factor": 0.05,    # Match neighbor velocities
    "cohesion_factor": 0.005,   # Move toward group center
    "max_speed": 8.0,
    "time_per_frame": 1.0,
    "radius": 4.0,              # Drawn circle radius, also the boundary inset
}

COLORS = {
    "background": (245, 245, 245),
    "text": (40, 40, 40),
    # Boid i is drawn in palette[i % len(palette)]
    "palette": [
        (230, 41, 55),
        (0, 121, 241),
        (0, 158, 47),
        (255, 161, 0),
        (200, 122, 255),
    ],
}
