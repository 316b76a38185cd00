from ursina import *
import math

from cube_engine import CubeController, CubeSettings, select_layer
from cube_engine.models import AXIS_INDEX, FACE_COLORS, FACE_NORMALS

# ursina is left-handed with +z pointing away from the viewer, the engine is
# right-handed with the front face on +z. Flipping z maps one onto the other
# and reverses the sense of every rotation.
ANGLE_SIGN = -1


def to_scene(vector):
    return Vec3(float(vector[0]), float(vector[1]), -float(vector[2]))


def start(size=3, settings=None):
    settings = settings or CubeSettings.from_env()
    app = Ursina(window_title='NxN Cube', borderless=False, fullscreen=False, position=(35, 35))
    # -------------------------------
    # Scene setup (floor, sky, camera)
    # -------------------------------
    Entity(
        model='quad',
        scale=60,
        texture='white_cube',
        texture_scale=(60, 60),
        rotation_x=90,
        y=-8,
        color=color.light_gray
    )
    Entity(
        model='sphere',
        scale=100,
        texture='sky_default',
        double_sided=True
    )
    EditorCamera()

    # -------------------------------
    # nonlocal variables and state
    # -------------------------------
    controller = CubeController(size, settings)
    PARENT = Entity()  # used as a temporary parent for the turning layer
    ENTITIES = {}
    attached = {'turn': None}

    move_message = Text(text='', position=(-0.85, 0.45), scale=1.5, color=color.black)
    log_message = Text(text='', position=(0.55, 0.45), scale=1.2, color=color.black)
    Text(
        text="S: scramble   ENTER: solve   3-7: cube size",
        position=(-0.85, -0.45),
        color=color.black,
    )

    face_rotation = {
        'L': Vec3(0, 90, 0),
        'R': Vec3(0, -90, 0),
        'F': Vec3(0, 0, 0),
        'B': Vec3(0, 180, 0),
        'U': Vec3(-90, 0, 0),
        'D': Vec3(90, 0, 0)
    }

    # -------------------------------
    # Cubies and stickers
    # -------------------------------
    def create_sticker(cubie_entity, face):
        return Entity(
            parent=cubie_entity,
            model='quad',
            color=getattr(color, FACE_COLORS[face]),
            scale=0.9,
            position=to_scene(FACE_NORMALS[face]) * 0.501,
            rotation=face_rotation[face],
            double_sided=True,
        )

    def build_cube():
        for entity in list(ENTITIES.values()):
            destroy(entity)
        ENTITIES.clear()
        PARENT.rotation = Vec3(0, 0, 0)
        attached['turn'] = None
        state = controller.state
        for cubie in state.cubies:
            entity = Entity(
                model='cube',
                color=color.dark_gray,
                position=to_scene(state.position(cubie)),
                scale=settings.cubie_size,
            )
            entity.cubie_id = cubie.id
            for sticker in cubie.stickers:
                create_sticker(entity, sticker.face)
            ENTITIES[cubie.id] = entity
        camera.world_position = (0, 0, -5 * state.size)
        camera.look_at(Vec3(0, 0, 0))
        refresh_text()

    def refresh_text():
        if controller.is_busy:
            status = f"Moves left: {controller.scheduler.queue_length + 1}"
        elif controller.is_solved():
            status = "Solved"
        else:
            status = f"Scrambled ({len(controller.history)} moves to solve)"
        move_message.text = f"{controller.size}x{controller.size}x{controller.size}  {status}"
        log_message.text = "\n".join(controller.move_log[-15:])

    # -------------------------------
    # Rotation functions
    # -------------------------------
    def set_pivot_angle(axis, angle):
        rotation = Vec3(0, 0, 0)
        rotation[AXIS_INDEX[axis]] = ANGLE_SIGN * math.degrees(angle)
        PARENT.rotation = rotation

    def attach_layer(turn, cubie_ids):
        for cubie_id in cubie_ids:
            ENTITIES[cubie_id].world_parent = PARENT
        attached['turn'] = turn

    def reparent_to_scene(move, notation):
        state = controller.state
        # a turn is the identity on its own layer, so the cubies it moved are
        # the ones sitting on that layer now
        cubie_ids = [cubie.id for cubie in select_layer(state, move.axis, move.layer_index, settings)]
        if attached['turn'] is None:
            attach_layer(move, cubie_ids)
        set_pivot_angle(move.axis, move.angle)
        for cubie_id in cubie_ids:
            entity = ENTITIES[cubie_id]
            world_rot = entity.world_rotation
            entity.world_parent = scene
            entity.position = to_scene(state.position(state.by_id(cubie_id)))
            entity.rotation = Vec3(*(round(r / 90) * 90 for r in world_rot))
        PARENT.rotation = Vec3(0, 0, 0)
        attached['turn'] = None
        refresh_text()

    controller.on_move_end(reparent_to_scene)
    controller.on_move_start(lambda move, notation: print(f"Performing move: {notation}"))
    controller.on_queue_idle(refresh_text)

    # -------------------------------
    # Frame loop and input handling
    # -------------------------------
    class InputHandler(Entity):
        def update(self):
            controller.tick(time.dt)
            turn = controller.scheduler.active
            if turn is None:
                return
            if attached['turn'] is not turn:
                attach_layer(turn, turn.cubie_ids)
                refresh_text()
            set_pivot_angle(turn.move.axis, turn.angle)

        def input(self, key):
            if key == 's':
                if not controller.scramble():
                    print("Busy, scramble ignored.")
            elif key == 'enter':
                if not controller.solve():
                    print("Nothing to solve.")
            elif key in ('3', '4', '5', '6', '7'):
                controller.create_cube(int(key))
                build_cube()

    build_cube()
    InputHandler()
    app.run()


if __name__ == '__main__':
    start()
