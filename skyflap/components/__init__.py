"""Components that give game objects physics, rendering and game behaviour."""