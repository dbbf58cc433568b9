from django.db import models


class Role(models.TextChoices):
    HEAD_COACH = 'HEAD_COACH', 'Head Coach'
    ASSISTANT_COACH = 'ASSISTANT_COACH', 'Assistant Coach'
    PLAYER = 'PLAYER', 'Player'
    PARENT = 'PARENT', 'Parent'


class CoordinatorType(models.TextChoices):
    OC = 'OC', 'Offensive Coordinator'
    DC = 'DC', 'Defensive Coordinator'
    ST = 'ST', 'Special Teams Coordinator'


class Unit(models.TextChoices):
    OFFENSE = 'OFFENSE', 'Offense'
    DEFENSE = 'DEFENSE', 'Defense'
    SPECIAL_TEAMS = 'SPECIAL_TEAMS', 'Special Teams'


class Visibility(models.TextChoices):
    STAFF = 'staff', 'Staff Only'
    PLAYERS = 'players', 'Players & Staff'
    PARENTS = 'parents', 'Parents'
    ALL = 'all', 'Everyone'


class OrganizationType(models.TextChoices):
    SCHOOL = 'school', 'School'
    UNIVERSITY = 'university', 'University'
    CLUB = 'club', 'Club'


STAFF_ROLES = {Role.HEAD_COACH, Role.ASSISTANT_COACH}
