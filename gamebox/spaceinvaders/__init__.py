"""Space Invaders: the entities, the world simulation and the playable game."""