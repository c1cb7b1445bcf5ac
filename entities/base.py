class Entity:
    def __init__(self):
        self.body_component = None
        self.movement_component = None
