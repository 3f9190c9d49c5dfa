"""Hand-curated Go project layouts, one per supported architecture.

Each layout is a mapping with a ``description``, the ``run_hint`` passed to
``go run`` and the ordered ``entries`` tuple.  File contents are Jinja2
content templates using the ``{{ module }}`` and ``{{ app_name }}`` markers;
paths never contain markers.
"""

from __future__ import annotations

from typing import Any

from .models import EntryKind, TemplateEntry


def _dir(path: str) -> TemplateEntry:
    return TemplateEntry(path=path, kind=EntryKind.DIRECTORY)


def _file(path: str, content: str) -> TemplateEntry:
    return TemplateEntry(path=path, kind=EntryKind.FILE, content=content)


# ---------------------------------------------------------------------------
# Shared files
# ---------------------------------------------------------------------------

GO_VERSION = "1.21"

GO_MOD = f"""module {{{{ module }}}}

go {GO_VERSION}
"""

GITIGNORE = """# Binaries
/bin/
*.exe
*.test
*.out

# Dependencies
/vendor/

# Editor
.idea/
.vscode/
"""


def _readme(title: str, run_hint: str, layout: str, setup: str = "go mod tidy") -> str:
    return (
        "# {{ app_name }}\n"
        "\n"
        f"{title} project scaffolded for module `{{{{ module }}}}`.\n"
        "\n"
        "## Layout\n"
        "\n"
        "```\n"
        f"{layout.strip()}\n"
        "```\n"
        "\n"
        "## Running\n"
        "\n"
        "```\n"
        f"{setup}\n"
        f"go run {run_hint}\n"
        "```\n"
    )


# ---------------------------------------------------------------------------
# flat
# ---------------------------------------------------------------------------

_FLAT_MAIN = """package main

import (
	"log"
	"net/http"
)

func main() {
	store := NewStore()
	mux := http.NewServeMux()
	registerHandlers(mux, store)

	log.Println("{{ app_name }} listening on :8080")
	log.Fatal(http.ListenAndServe(":8080", mux))
}
"""

_FLAT_MODELS = """package main

// User is the only entity of this service.
type User struct {
	ID    int    `json:"id"`
	Name  string `json:"name"`
	Email string `json:"email"`
}
"""

_FLAT_STORE = """package main

import "sync"

// Store keeps users in memory.
type Store struct {
	mu     sync.RWMutex
	nextID int
	users  map[int]User
}

func NewStore() *Store {
	return &Store{nextID: 1, users: map[int]User{}}
}

func (s *Store) Add(u User) User {
	s.mu.Lock()
	defer s.mu.Unlock()
	u.ID = s.nextID
	s.nextID++
	s.users[u.ID] = u
	return u
}

func (s *Store) All() []User {
	s.mu.RLock()
	defer s.mu.RUnlock()
	out := make([]User, 0, len(s.users))
	for _, u := range s.users {
		out = append(out, u)
	}
	return out
}
"""

_FLAT_HANDLERS = """package main

import (
	"encoding/json"
	"net/http"
)

func registerHandlers(mux *http.ServeMux, store *Store) {
	mux.HandleFunc("/users", func(w http.ResponseWriter, r *http.Request) {
		switch r.Method {
		case http.MethodGet:
			writeJSON(w, http.StatusOK, store.All())
		case http.MethodPost:
			var u User
			if err := json.NewDecoder(r.Body).Decode(&u); err != nil {
				http.Error(w, err.Error(), http.StatusBadRequest)
				return
			}
			writeJSON(w, http.StatusCreated, store.Add(u))
		default:
			w.WriteHeader(http.StatusMethodNotAllowed)
		}
	})
}

func writeJSON(w http.ResponseWriter, status int, v any) {
	w.Header().Set("Content-Type", "application/json")
	w.WriteHeader(status)
	_ = json.NewEncoder(w).Encode(v)
}
"""

FLAT: dict[str, Any] = {
    "description": "Simple flat structure",
    "run_hint": ".",
    "entries": (
        _file("go.mod", GO_MOD),
        _file("main.go", _FLAT_MAIN),
        _file("handlers.go", _FLAT_HANDLERS),
        _file("models.go", _FLAT_MODELS),
        _file("store.go", _FLAT_STORE),
        _file(".gitignore", GITIGNORE),
        _file(
            "README.md",
            _readme(
                "Flat",
                ".",
                "main.go      entry point\nhandlers.go  HTTP handlers\n"
                "models.go    types\nstore.go     in-memory storage",
            ),
        ),
    ),
}


# ---------------------------------------------------------------------------
# ddd
# ---------------------------------------------------------------------------

_DDD_MAIN = """package main

import (
	"log"
	"net/http"

	"{{ module }}/internal/application"
	"{{ module }}/internal/infrastructure/persistence"
	userhttp "{{ module }}/internal/interfaces/http"
)

func main() {
	repo := persistence.NewMemoryUserRepository()
	service := application.NewUserService(repo)
	handler := userhttp.NewUserHandler(service)

	mux := http.NewServeMux()
	handler.Register(mux)

	log.Println("{{ app_name }} listening on :8080")
	log.Fatal(http.ListenAndServe(":8080", mux))
}
"""

_DDD_USER = """package user

import (
	"errors"
	"strings"
)

var ErrInvalidEmail = errors.New("user: invalid email")

// Email is a value object.
type Email string

func NewEmail(raw string) (Email, error) {
	if !strings.Contains(raw, "@") {
		return "", ErrInvalidEmail
	}
	return Email(strings.ToLower(raw)), nil
}

// User is the aggregate root of the user bounded context.
type User struct {
	ID    string
	Name  string
	Email Email
}

func New(id, name string, email Email) *User {
	return &User{ID: id, Name: name, Email: email}
}

func (u *User) Rename(name string) {
	u.Name = name
}
"""

_DDD_REPOSITORY = """package user

import "errors"

var ErrNotFound = errors.New("user: not found")

// Repository is the persistence port of the user aggregate.
type Repository interface {
	Save(u *User) error
	FindByID(id string) (*User, error)
	List() ([]*User, error)
}
"""

_DDD_SERVICE = """package application

import (
	"fmt"

	"{{ module }}/internal/domain/user"
)

// UserService coordinates use cases of the user context.
type UserService struct {
	repo   user.Repository
	nextID int
}

func NewUserService(repo user.Repository) *UserService {
	return &UserService{repo: repo}
}

func (s *UserService) Register(name, rawEmail string) (*user.User, error) {
	email, err := user.NewEmail(rawEmail)
	if err != nil {
		return nil, err
	}
	s.nextID++
	u := user.New(fmt.Sprintf("u-%d", s.nextID), name, email)
	if err := s.repo.Save(u); err != nil {
		return nil, err
	}
	return u, nil
}

func (s *UserService) List() ([]*user.User, error) {
	return s.repo.List()
}
"""

_DDD_PERSISTENCE = """package persistence

import (
	"sync"

	"{{ module }}/internal/domain/user"
)

type MemoryUserRepository struct {
	mu    sync.RWMutex
	users map[string]*user.User
}

func NewMemoryUserRepository() *MemoryUserRepository {
	return &MemoryUserRepository{users: map[string]*user.User{}}
}

func (r *MemoryUserRepository) Save(u *user.User) error {
	r.mu.Lock()
	defer r.mu.Unlock()
	r.users[u.ID] = u
	return nil
}

func (r *MemoryUserRepository) FindByID(id string) (*user.User, error) {
	r.mu.RLock()
	defer r.mu.RUnlock()
	u, ok := r.users[id]
	if !ok {
		return nil, user.ErrNotFound
	}
	return u, nil
}

func (r *MemoryUserRepository) List() ([]*user.User, error) {
	r.mu.RLock()
	defer r.mu.RUnlock()
	out := make([]*user.User, 0, len(r.users))
	for _, u := range r.users {
		out = append(out, u)
	}
	return out, nil
}
"""

_DDD_HANDLER = """package http

import (
	"encoding/json"
	"net/http"

	"{{ module }}/internal/application"
)

type UserHandler struct {
	service *application.UserService
}

func NewUserHandler(service *application.UserService) *UserHandler {
	return &UserHandler{service: service}
}

func (h *UserHandler) Register(mux *http.ServeMux) {
	mux.HandleFunc("/users", h.list)
}

func (h *UserHandler) list(w http.ResponseWriter, r *http.Request) {
	users, err := h.service.List()
	if err != nil {
		http.Error(w, err.Error(), http.StatusInternalServerError)
		return
	}
	w.Header().Set("Content-Type", "application/json")
	_ = json.NewEncoder(w).Encode(users)
}
"""

DDD: dict[str, Any] = {
    "description": "Domain-Driven Design",
    "run_hint": "./cmd/api",
    "entries": (
        _dir("cmd/api"),
        _dir("internal/domain/user"),
        _dir("internal/application"),
        _dir("internal/infrastructure/persistence"),
        _dir("internal/interfaces/http"),
        _file("go.mod", GO_MOD),
        _file("cmd/api/main.go", _DDD_MAIN),
        _file("internal/domain/user/user.go", _DDD_USER),
        _file("internal/domain/user/repository.go", _DDD_REPOSITORY),
        _file("internal/application/user_service.go", _DDD_SERVICE),
        _file(
            "internal/infrastructure/persistence/memory_user_repository.go",
            _DDD_PERSISTENCE,
        ),
        _file("internal/interfaces/http/user_handler.go", _DDD_HANDLER),
        _file(".gitignore", GITIGNORE),
        _file(
            "README.md",
            _readme(
                "Domain-Driven Design",
                "./cmd/api",
                "cmd/api                  entry point\n"
                "internal/domain          aggregates, value objects, repository ports\n"
                "internal/application     application services\n"
                "internal/infrastructure  repository implementations\n"
                "internal/interfaces      HTTP adapters",
            ),
        ),
    ),
}


# ---------------------------------------------------------------------------
# clean
# ---------------------------------------------------------------------------

_CLEAN_MAIN = """package main

import (
	"log"
	"net/http"

	httpdelivery "{{ module }}/delivery/http"
	"{{ module }}/repository"
	"{{ module }}/usecase"
)

func main() {
	repo := repository.NewMemoryUserRepository()
	uc := usecase.NewUserUsecase(repo)

	mux := http.NewServeMux()
	httpdelivery.NewUserHandler(mux, uc)

	log.Println("{{ app_name }} listening on :8080")
	log.Fatal(http.ListenAndServe(":8080", mux))
}
"""

_CLEAN_DOMAIN = """package domain

import (
	"context"
	"errors"
)

var ErrNotFound = errors.New("not found")

type User struct {
	ID    int64  `json:"id"`
	Name  string `json:"name"`
	Email string `json:"email"`
}

// UserRepository is implemented by the repository layer.
type UserRepository interface {
	GetByID(ctx context.Context, id int64) (User, error)
	Fetch(ctx context.Context) ([]User, error)
	Store(ctx context.Context, u *User) error
}

// UserUsecase is implemented by the usecase layer.
type UserUsecase interface {
	GetByID(ctx context.Context, id int64) (User, error)
	Fetch(ctx context.Context) ([]User, error)
	Store(ctx context.Context, u *User) error
}
"""

_CLEAN_USECASE = """package usecase

import (
	"context"

	"{{ module }}/domain"
)

type userUsecase struct {
	repo domain.UserRepository
}

func NewUserUsecase(repo domain.UserRepository) domain.UserUsecase {
	return &userUsecase{repo: repo}
}

func (u *userUsecase) GetByID(ctx context.Context, id int64) (domain.User, error) {
	return u.repo.GetByID(ctx, id)
}

func (u *userUsecase) Fetch(ctx context.Context) ([]domain.User, error) {
	return u.repo.Fetch(ctx)
}

func (u *userUsecase) Store(ctx context.Context, user *domain.User) error {
	return u.repo.Store(ctx, user)
}
"""

_CLEAN_REPOSITORY = """package repository

import (
	"context"
	"sync"

	"{{ module }}/domain"
)

type memoryUserRepository struct {
	mu     sync.RWMutex
	nextID int64
	users  map[int64]domain.User
}

func NewMemoryUserRepository() domain.UserRepository {
	return &memoryUserRepository{users: map[int64]domain.User{}}
}

func (r *memoryUserRepository) GetByID(_ context.Context, id int64) (domain.User, error) {
	r.mu.RLock()
	defer r.mu.RUnlock()
	u, ok := r.users[id]
	if !ok {
		return domain.User{}, domain.ErrNotFound
	}
	return u, nil
}

func (r *memoryUserRepository) Fetch(_ context.Context) ([]domain.User, error) {
	r.mu.RLock()
	defer r.mu.RUnlock()
	out := make([]domain.User, 0, len(r.users))
	for _, u := range r.users {
		out = append(out, u)
	}
	return out, nil
}

func (r *memoryUserRepository) Store(_ context.Context, u *domain.User) error {
	r.mu.Lock()
	defer r.mu.Unlock()
	r.nextID++
	u.ID = r.nextID
	r.users[u.ID] = *u
	return nil
}
"""

_CLEAN_DELIVERY = """package http

import (
	"encoding/json"
	"net/http"

	"{{ module }}/domain"
)

type UserHandler struct {
	usecase domain.UserUsecase
}

func NewUserHandler(mux *http.ServeMux, uc domain.UserUsecase) {
	h := &UserHandler{usecase: uc}
	mux.HandleFunc("/users", h.Fetch)
}

func (h *UserHandler) Fetch(w http.ResponseWriter, r *http.Request) {
	users, err := h.usecase.Fetch(r.Context())
	if err != nil {
		http.Error(w, err.Error(), http.StatusInternalServerError)
		return
	}
	w.Header().Set("Content-Type", "application/json")
	_ = json.NewEncoder(w).Encode(users)
}
"""

CLEAN: dict[str, Any] = {
    "description": "Clean Architecture",
    "run_hint": ".",
    "entries": (
        _dir("domain"),
        _dir("usecase"),
        _dir("repository"),
        _dir("delivery/http"),
        _file("go.mod", GO_MOD),
        _file("main.go", _CLEAN_MAIN),
        _file("domain/user.go", _CLEAN_DOMAIN),
        _file("usecase/user_usecase.go", _CLEAN_USECASE),
        _file("repository/memory_user_repository.go", _CLEAN_REPOSITORY),
        _file("delivery/http/user_handler.go", _CLEAN_DELIVERY),
        _file(".gitignore", GITIGNORE),
        _file(
            "README.md",
            _readme(
                "Clean Architecture",
                ".",
                "domain      entities and interfaces\n"
                "usecase     business rules\n"
                "repository  data access\n"
                "delivery    HTTP transport",
            ),
        ),
    ),
}


# ---------------------------------------------------------------------------
# feature
# ---------------------------------------------------------------------------

_FEATURE_MAIN = """package main

import (
	"log"
	"net/http"

	"{{ module }}/internal/features/health"
	"{{ module }}/internal/features/users"
)

func main() {
	mux := http.NewServeMux()
	health.Register(mux)
	users.Register(mux, users.NewService(users.NewRepository()))

	log.Println("{{ app_name }} listening on :8080")
	log.Fatal(http.ListenAndServe(":8080", mux))
}
"""

_FEATURE_USERS_MODEL = """package users

type User struct {
	ID    int    `json:"id"`
	Name  string `json:"name"`
	Email string `json:"email"`
}
"""

_FEATURE_USERS_REPOSITORY = """package users

import "sync"

type Repository struct {
	mu    sync.RWMutex
	users []User
}

func NewRepository() *Repository {
	return &Repository{}
}

func (r *Repository) Add(u User) User {
	r.mu.Lock()
	defer r.mu.Unlock()
	u.ID = len(r.users) + 1
	r.users = append(r.users, u)
	return u
}

func (r *Repository) All() []User {
	r.mu.RLock()
	defer r.mu.RUnlock()
	return append([]User(nil), r.users...)
}
"""

_FEATURE_USERS_SERVICE = """package users

type Service struct {
	repo *Repository
}

func NewService(repo *Repository) *Service {
	return &Service{repo: repo}
}

func (s *Service) Create(name, email string) User {
	return s.repo.Add(User{Name: name, Email: email})
}

func (s *Service) List() []User {
	return s.repo.All()
}
"""

_FEATURE_USERS_HANDLER = """package users

import (
	"net/http"

	"{{ module }}/internal/shared/httpx"
)

func Register(mux *http.ServeMux, service *Service) {
	mux.HandleFunc("/users", func(w http.ResponseWriter, r *http.Request) {
		httpx.WriteJSON(w, http.StatusOK, service.List())
	})
}
"""

_FEATURE_HEALTH_HANDLER = """package health

import (
	"net/http"

	"{{ module }}/internal/shared/httpx"
)

func Register(mux *http.ServeMux) {
	mux.HandleFunc("/health", func(w http.ResponseWriter, r *http.Request) {
		httpx.WriteJSON(w, http.StatusOK, map[string]string{"status": "ok"})
	})
}
"""

_FEATURE_HTTPX = """package httpx

import (
	"encoding/json"
	"net/http"
)

// WriteJSON is shared by every feature's handlers.
func WriteJSON(w http.ResponseWriter, status int, v any) {
	w.Header().Set("Content-Type", "application/json")
	w.WriteHeader(status)
	_ = json.NewEncoder(w).Encode(v)
}
"""

FEATURE: dict[str, Any] = {
    "description": "Feature-based structure",
    "run_hint": "./cmd/server",
    "entries": (
        _dir("cmd/server"),
        _dir("internal/features/users"),
        _dir("internal/features/health"),
        _dir("internal/shared/httpx"),
        _file("go.mod", GO_MOD),
        _file("cmd/server/main.go", _FEATURE_MAIN),
        _file("internal/features/users/model.go", _FEATURE_USERS_MODEL),
        _file("internal/features/users/repository.go", _FEATURE_USERS_REPOSITORY),
        _file("internal/features/users/service.go", _FEATURE_USERS_SERVICE),
        _file("internal/features/users/handler.go", _FEATURE_USERS_HANDLER),
        _file("internal/features/health/handler.go", _FEATURE_HEALTH_HANDLER),
        _file("internal/shared/httpx/json.go", _FEATURE_HTTPX),
        _file(".gitignore", GITIGNORE),
        _file(
            "README.md",
            _readme(
                "Feature-based",
                "./cmd/server",
                "cmd/server         entry point\n"
                "internal/features  one package per feature\n"
                "internal/shared    cross-feature helpers",
            ),
        ),
    ),
}


# ---------------------------------------------------------------------------
# hexagonal
# ---------------------------------------------------------------------------

_HEX_MAIN = """package main

import (
	"log"
	"net/http"

	userhttp "{{ module }}/internal/adapters/primary/http"
	"{{ module }}/internal/adapters/secondary/memory"
	"{{ module }}/internal/core/services"
)

func main() {
	repo := memory.NewUserRepository()
	service := services.NewUserService(repo)

	mux := http.NewServeMux()
	userhttp.NewUserHandler(service).Register(mux)

	log.Println("{{ app_name }} listening on :8080")
	log.Fatal(http.ListenAndServe(":8080", mux))
}
"""

_HEX_DOMAIN = """package domain

type User struct {
	ID    string `json:"id"`
	Name  string `json:"name"`
	Email string `json:"email"`
}
"""

_HEX_PORTS = """package ports

import "{{ module }}/internal/core/domain"

// UserRepository is a driven (secondary) port.
type UserRepository interface {
	Save(u domain.User) error
	Get(id string) (domain.User, error)
	List() ([]domain.User, error)
}

// UserService is a driving (primary) port.
type UserService interface {
	Create(name, email string) (domain.User, error)
	Get(id string) (domain.User, error)
	List() ([]domain.User, error)
}
"""

_HEX_SERVICE = """package services

import (
	"fmt"

	"{{ module }}/internal/core/domain"
	"{{ module }}/internal/core/ports"
)

type userService struct {
	repo  ports.UserRepository
	count int
}

func NewUserService(repo ports.UserRepository) ports.UserService {
	return &userService{repo: repo}
}

func (s *userService) Create(name, email string) (domain.User, error) {
	s.count++
	u := domain.User{ID: fmt.Sprint(s.count), Name: name, Email: email}
	return u, s.repo.Save(u)
}

func (s *userService) Get(id string) (domain.User, error) {
	return s.repo.Get(id)
}

func (s *userService) List() ([]domain.User, error) {
	return s.repo.List()
}
"""

_HEX_HTTP = """package http

import (
	"encoding/json"
	"net/http"

	"{{ module }}/internal/core/ports"
)

type UserHandler struct {
	service ports.UserService
}

func NewUserHandler(service ports.UserService) *UserHandler {
	return &UserHandler{service: service}
}

func (h *UserHandler) Register(mux *http.ServeMux) {
	mux.HandleFunc("/users", func(w http.ResponseWriter, r *http.Request) {
		users, err := h.service.List()
		if err != nil {
			http.Error(w, err.Error(), http.StatusInternalServerError)
			return
		}
		w.Header().Set("Content-Type", "application/json")
		_ = json.NewEncoder(w).Encode(users)
	})
}
"""

_HEX_MEMORY = """package memory

import (
	"errors"
	"sync"

	"{{ module }}/internal/core/domain"
)

var ErrNotFound = errors.New("user not found")

type UserRepository struct {
	mu    sync.RWMutex
	users map[string]domain.User
}

func NewUserRepository() *UserRepository {
	return &UserRepository{users: map[string]domain.User{}}
}

func (r *UserRepository) Save(u domain.User) error {
	r.mu.Lock()
	defer r.mu.Unlock()
	r.users[u.ID] = u
	return nil
}

func (r *UserRepository) Get(id string) (domain.User, error) {
	r.mu.RLock()
	defer r.mu.RUnlock()
	u, ok := r.users[id]
	if !ok {
		return domain.User{}, ErrNotFound
	}
	return u, nil
}

func (r *UserRepository) List() ([]domain.User, error) {
	r.mu.RLock()
	defer r.mu.RUnlock()
	out := make([]domain.User, 0, len(r.users))
	for _, u := range r.users {
		out = append(out, u)
	}
	return out, nil
}
"""

HEXAGONAL: dict[str, Any] = {
    "description": "Hexagonal Architecture",
    "run_hint": "./cmd/app",
    "entries": (
        _dir("cmd/app"),
        _dir("internal/core/domain"),
        _dir("internal/core/ports"),
        _dir("internal/core/services"),
        _dir("internal/adapters/primary/http"),
        _dir("internal/adapters/secondary/memory"),
        _file("go.mod", GO_MOD),
        _file("cmd/app/main.go", _HEX_MAIN),
        _file("internal/core/domain/user.go", _HEX_DOMAIN),
        _file("internal/core/ports/ports.go", _HEX_PORTS),
        _file("internal/core/services/user_service.go", _HEX_SERVICE),
        _file("internal/adapters/primary/http/user_handler.go", _HEX_HTTP),
        _file("internal/adapters/secondary/memory/user_repository.go", _HEX_MEMORY),
        _file(".gitignore", GITIGNORE),
        _file(
            "README.md",
            _readme(
                "Hexagonal Architecture",
                "./cmd/app",
                "internal/core               domain, ports and services\n"
                "internal/adapters/primary   driving adapters (HTTP)\n"
                "internal/adapters/secondary driven adapters (storage)",
            ),
        ),
    ),
}


# ---------------------------------------------------------------------------
# modular
# ---------------------------------------------------------------------------

_MODULAR_MAIN = """package main

import (
	"log"
	"net/http"

	"{{ module }}/internal/modules/orders"
	"{{ module }}/internal/modules/users"
	"{{ module }}/internal/platform/module"
)

func main() {
	mux := http.NewServeMux()
	for _, m := range []module.Module{users.New(), orders.New()} {
		log.Printf("registering module %s", m.Name())
		m.Register(mux)
	}

	log.Println("{{ app_name }} listening on :8080")
	log.Fatal(http.ListenAndServe(":8080", mux))
}
"""

_MODULAR_CONTRACT = """package module

import "net/http"

// Module is the contract every bounded module of the monolith implements.
type Module interface {
	Name() string
	Register(mux *http.ServeMux)
}
"""


def _modular_module(package: str, route: str) -> str:
    return f"""package {package}

import (
	"encoding/json"
	"net/http"
)

type Module struct {{
	service *Service
}}

func New() *Module {{
	return &Module{{service: NewService()}}
}}

func (m *Module) Name() string {{ return "{package}" }}

func (m *Module) Register(mux *http.ServeMux) {{
	mux.HandleFunc("{route}", func(w http.ResponseWriter, r *http.Request) {{
		w.Header().Set("Content-Type", "application/json")
		_ = json.NewEncoder(w).Encode(m.service.List())
	}})
}}
"""


def _modular_service(package: str, item: str) -> str:
    return f"""package {package}

type {item} struct {{
	ID   int    `json:"id"`
	Name string `json:"name"`
}}

type Service struct {{
	items []{item}
}}

func NewService() *Service {{
	return &Service{{}}
}}

func (s *Service) List() []{item} {{
	return s.items
}}
"""


MODULAR: dict[str, Any] = {
    "description": "Modular monolith",
    "run_hint": "./cmd/app",
    "entries": (
        _dir("cmd/app"),
        _dir("internal/platform/module"),
        _dir("internal/modules/users"),
        _dir("internal/modules/orders"),
        _file("go.mod", GO_MOD),
        _file("cmd/app/main.go", _MODULAR_MAIN),
        _file("internal/platform/module/module.go", _MODULAR_CONTRACT),
        _file("internal/modules/users/module.go", _modular_module("users", "/users")),
        _file("internal/modules/users/service.go", _modular_service("users", "User")),
        _file("internal/modules/orders/module.go", _modular_module("orders", "/orders")),
        _file("internal/modules/orders/service.go", _modular_service("orders", "Order")),
        _file(".gitignore", GITIGNORE),
        _file(
            "README.md",
            _readme(
                "Modular monolith",
                "./cmd/app",
                "internal/platform  module contract\n"
                "internal/modules   self-contained modules",
            ),
        ),
    ),
}


# ---------------------------------------------------------------------------
# monorepo
# ---------------------------------------------------------------------------

_MONO_WORK = f"""go {GO_VERSION}

use (
	./libs/shared
	./services/api
	./services/worker
)
"""

_MONO_SHARED_MOD = f"""module {{{{ module }}}}/libs/shared

go {GO_VERSION}
"""


def _mono_service_mod(service: str) -> str:
    return f"""module {{{{ module }}}}/services/{service}

go {GO_VERSION}

require {{{{ module }}}}/libs/shared v0.0.0

replace {{{{ module }}}}/libs/shared => ../../libs/shared
"""


_MONO_LOGGER = """package logger

import (
	"log"
	"os"
)

// New returns a logger prefixed with the service name.
func New(service string) *log.Logger {
	return log.New(os.Stdout, "["+service+"] ", log.LstdFlags)
}
"""

_MONO_API_MAIN = """package main

import (
	"net/http"

	"{{ module }}/libs/shared/logger"
)

func main() {
	log := logger.New("api")
	mux := http.NewServeMux()
	mux.HandleFunc("/health", func(w http.ResponseWriter, r *http.Request) {
		w.Write([]byte("ok"))
	})

	log.Println("{{ app_name }} api listening on :8080")
	log.Fatal(http.ListenAndServe(":8080", mux))
}
"""

_MONO_WORKER_MAIN = """package main

import (
	"time"

	"{{ module }}/libs/shared/logger"
)

func main() {
	log := logger.New("worker")
	ticker := time.NewTicker(5 * time.Second)
	defer ticker.Stop()

	log.Println("{{ app_name }} worker started")
	for range ticker.C {
		log.Println("tick")
	}
}
"""

MONOREPO: dict[str, Any] = {
    "description": "Monorepo structure",
    "run_hint": "./services/api",
    "setup_command": "go work sync",
    "entries": (
        _dir("services/api"),
        _dir("services/worker"),
        _dir("libs/shared/logger"),
        _file("go.work", _MONO_WORK),
        _file("libs/shared/go.mod", _MONO_SHARED_MOD),
        _file("libs/shared/logger/logger.go", _MONO_LOGGER),
        _file("services/api/go.mod", _mono_service_mod("api")),
        _file("services/api/main.go", _MONO_API_MAIN),
        _file("services/worker/go.mod", _mono_service_mod("worker")),
        _file("services/worker/main.go", _MONO_WORKER_MAIN),
        _file(".gitignore", GITIGNORE),
        _file(
            "README.md",
            _readme(
                "Monorepo",
                "./services/api",
                "go.work          workspace definition\n"
                "services/api     HTTP service\n"
                "services/worker  background worker\n"
                "libs/shared      code shared across services",
                setup="go work sync",
            ),
        ),
    ),
}


# ---------------------------------------------------------------------------
# cqrs
# ---------------------------------------------------------------------------

_CQRS_MAIN = """package main

import (
	"log"
	"net/http"

	"{{ module }}/internal/api"
	"{{ module }}/internal/commands"
	"{{ module }}/internal/queries"
	"{{ module }}/internal/store"
)

func main() {
	s := store.NewMemory()
	handler := api.NewHandler(commands.NewCreateUserHandler(s), queries.NewGetUserHandler(s))

	mux := http.NewServeMux()
	handler.Register(mux)

	log.Println("{{ app_name }} listening on :8080")
	log.Fatal(http.ListenAndServe(":8080", mux))
}
"""

_CQRS_DOMAIN = """package domain

type User struct {
	ID    string `json:"id"`
	Name  string `json:"name"`
	Email string `json:"email"`
}
"""

_CQRS_COMMAND = """package commands

import (
	"fmt"

	"{{ module }}/internal/domain"
)

type CreateUser struct {
	Name  string `json:"name"`
	Email string `json:"email"`
}

type UserWriter interface {
	Insert(u domain.User) error
	Count() int
}

type CreateUserHandler struct {
	writer UserWriter
}

func NewCreateUserHandler(writer UserWriter) *CreateUserHandler {
	return &CreateUserHandler{writer: writer}
}

func (h *CreateUserHandler) Handle(cmd CreateUser) (string, error) {
	id := fmt.Sprintf("user-%d", h.writer.Count()+1)
	return id, h.writer.Insert(domain.User{ID: id, Name: cmd.Name, Email: cmd.Email})
}
"""

_CQRS_QUERY = """package queries

import "{{ module }}/internal/domain"

type GetUser struct {
	ID string
}

type UserReader interface {
	FindByID(id string) (domain.User, bool)
}

type GetUserHandler struct {
	reader UserReader
}

func NewGetUserHandler(reader UserReader) *GetUserHandler {
	return &GetUserHandler{reader: reader}
}

func (h *GetUserHandler) Handle(q GetUser) (domain.User, bool) {
	return h.reader.FindByID(q.ID)
}
"""

_CQRS_STORE = """package store

import (
	"sync"

	"{{ module }}/internal/domain"
)

// Memory backs both the write side and the read side.
type Memory struct {
	mu    sync.RWMutex
	users map[string]domain.User
}

func NewMemory() *Memory {
	return &Memory{users: map[string]domain.User{}}
}

func (m *Memory) Insert(u domain.User) error {
	m.mu.Lock()
	defer m.mu.Unlock()
	m.users[u.ID] = u
	return nil
}

func (m *Memory) Count() int {
	m.mu.RLock()
	defer m.mu.RUnlock()
	return len(m.users)
}

func (m *Memory) FindByID(id string) (domain.User, bool) {
	m.mu.RLock()
	defer m.mu.RUnlock()
	u, ok := m.users[id]
	return u, ok
}
"""

_CQRS_API = """package api

import (
	"encoding/json"
	"net/http"

	"{{ module }}/internal/commands"
	"{{ module }}/internal/queries"
)

type Handler struct {
	create *commands.CreateUserHandler
	get    *queries.GetUserHandler
}

func NewHandler(create *commands.CreateUserHandler, get *queries.GetUserHandler) *Handler {
	return &Handler{create: create, get: get}
}

func (h *Handler) Register(mux *http.ServeMux) {
	mux.HandleFunc("/users", func(w http.ResponseWriter, r *http.Request) {
		if r.Method == http.MethodPost {
			var cmd commands.CreateUser
			if err := json.NewDecoder(r.Body).Decode(&cmd); err != nil {
				http.Error(w, err.Error(), http.StatusBadRequest)
				return
			}
			id, err := h.create.Handle(cmd)
			if err != nil {
				http.Error(w, err.Error(), http.StatusInternalServerError)
				return
			}
			w.WriteHeader(http.StatusCreated)
			_ = json.NewEncoder(w).Encode(map[string]string{"id": id})
			return
		}
		user, ok := h.get.Handle(queries.GetUser{ID: r.URL.Query().Get("id")})
		if !ok {
			http.NotFound(w, r)
			return
		}
		_ = json.NewEncoder(w).Encode(user)
	})
}
"""

CQRS: dict[str, Any] = {
    "description": "Command Query Responsibility Segregation",
    "run_hint": "./cmd/app",
    "entries": (
        _dir("cmd/app"),
        _dir("internal/domain"),
        _dir("internal/commands"),
        _dir("internal/queries"),
        _dir("internal/store"),
        _dir("internal/api"),
        _file("go.mod", GO_MOD),
        _file("cmd/app/main.go", _CQRS_MAIN),
        _file("internal/domain/user.go", _CQRS_DOMAIN),
        _file("internal/commands/create_user.go", _CQRS_COMMAND),
        _file("internal/queries/get_user.go", _CQRS_QUERY),
        _file("internal/store/memory.go", _CQRS_STORE),
        _file("internal/api/handler.go", _CQRS_API),
        _file(".gitignore", GITIGNORE),
        _file(
            "README.md",
            _readme(
                "CQRS",
                "./cmd/app",
                "internal/commands  write side\n"
                "internal/queries   read side\n"
                "internal/store     storage shared by both sides\n"
                "internal/api       HTTP transport",
            ),
        ),
    ),
}


# ---------------------------------------------------------------------------
# onion
# ---------------------------------------------------------------------------

_ONION_MAIN = """package main

import (
	"log"
	"net/http"

	"{{ module }}/internal/application/services"
	"{{ module }}/internal/infrastructure/persistence"
	userhttp "{{ module }}/internal/presentation/http"
)

func main() {
	repo := persistence.NewMemoryUserRepository()
	service := services.NewUserService(repo)

	mux := http.NewServeMux()
	userhttp.Register(mux, service)

	log.Println("{{ app_name }} listening on :8080")
	log.Fatal(http.ListenAndServe(":8080", mux))
}
"""

_ONION_ENTITY = """package entities

type User struct {
	ID    int    `json:"id"`
	Name  string `json:"name"`
	Email string `json:"email"`
}
"""

_ONION_REPOSITORY = """package repositories

import "{{ module }}/internal/domain/entities"

// UserRepository belongs to the domain core; outer layers implement it.
type UserRepository interface {
	Add(u entities.User) entities.User
	All() []entities.User
}
"""

_ONION_SERVICE = """package services

import (
	"{{ module }}/internal/domain/entities"
	"{{ module }}/internal/domain/repositories"
)

type UserService struct {
	repo repositories.UserRepository
}

func NewUserService(repo repositories.UserRepository) *UserService {
	return &UserService{repo: repo}
}

func (s *UserService) Register(name, email string) entities.User {
	return s.repo.Add(entities.User{Name: name, Email: email})
}

func (s *UserService) Users() []entities.User {
	return s.repo.All()
}
"""

_ONION_PERSISTENCE = """package persistence

import (
	"sync"

	"{{ module }}/internal/domain/entities"
)

type MemoryUserRepository struct {
	mu    sync.Mutex
	users []entities.User
}

func NewMemoryUserRepository() *MemoryUserRepository {
	return &MemoryUserRepository{}
}

func (r *MemoryUserRepository) Add(u entities.User) entities.User {
	r.mu.Lock()
	defer r.mu.Unlock()
	u.ID = len(r.users) + 1
	r.users = append(r.users, u)
	return u
}

func (r *MemoryUserRepository) All() []entities.User {
	r.mu.Lock()
	defer r.mu.Unlock()
	return append([]entities.User(nil), r.users...)
}
"""

_ONION_HTTP = """package http

import (
	"encoding/json"
	"net/http"

	"{{ module }}/internal/application/services"
)

func Register(mux *http.ServeMux, service *services.UserService) {
	mux.HandleFunc("/users", func(w http.ResponseWriter, r *http.Request) {
		w.Header().Set("Content-Type", "application/json")
		_ = json.NewEncoder(w).Encode(service.Users())
	})
}
"""

ONION: dict[str, Any] = {
    "description": "Onion Architecture",
    "run_hint": "./cmd/app",
    "entries": (
        _dir("cmd/app"),
        _dir("internal/domain/entities"),
        _dir("internal/domain/repositories"),
        _dir("internal/application/services"),
        _dir("internal/infrastructure/persistence"),
        _dir("internal/presentation/http"),
        _file("go.mod", GO_MOD),
        _file("cmd/app/main.go", _ONION_MAIN),
        _file("internal/domain/entities/user.go", _ONION_ENTITY),
        _file("internal/domain/repositories/user_repository.go", _ONION_REPOSITORY),
        _file("internal/application/services/user_service.go", _ONION_SERVICE),
        _file(
            "internal/infrastructure/persistence/memory_user_repository.go",
            _ONION_PERSISTENCE,
        ),
        _file("internal/presentation/http/user_handler.go", _ONION_HTTP),
        _file(".gitignore", GITIGNORE),
        _file(
            "README.md",
            _readme(
                "Onion Architecture",
                "./cmd/app",
                "internal/domain          core entities and repository interfaces\n"
                "internal/application     services around the core\n"
                "internal/infrastructure  persistence\n"
                "internal/presentation    HTTP",
            ),
        ),
    ),
}


# ---------------------------------------------------------------------------
# common (standard Go project layout)
# ---------------------------------------------------------------------------

_COMMON_MAIN = """package main

import (
	"log"

	"{{ module }}/internal/app"
	"{{ module }}/internal/config"
	"{{ module }}/pkg/version"
)

func main() {
	cfg := config.Load()
	log.Printf("{{ app_name }} %s starting", version.Version)
	if err := app.Run(cfg); err != nil {
		log.Fatal(err)
	}
}
"""

_COMMON_APP = """package app

import (
	"net/http"

	"{{ module }}/internal/config"
)

func Run(cfg config.Config) error {
	mux := http.NewServeMux()
	mux.HandleFunc("/health", func(w http.ResponseWriter, r *http.Request) {
		w.Write([]byte("ok"))
	})
	return http.ListenAndServe(cfg.Addr, mux)
}
"""

_COMMON_CONFIG = """package config

import "os"

type Config struct {
	Addr string
}

func Load() Config {
	addr := os.Getenv("APP_ADDR")
	if addr == "" {
		addr = ":8080"
	}
	return Config{Addr: addr}
}
"""

_COMMON_VERSION = """package version

// Version is overridden at build time with -ldflags.
var Version = "dev"
"""

_COMMON_CONFIG_YAML = """# Default configuration for {{ app_name }}
addr: ":8080"
"""

_COMMON_OPENAPI = """openapi: 3.0.3
info:
  title: {{ app_name }}
  version: 0.1.0
paths:
  /health:
    get:
      responses:
        "200":
          description: OK
"""

_COMMON_MAKEFILE = """BINARY := {{ app_name }}

.PHONY: build run test

build:
	go build -ldflags "-X {{ module }}/pkg/version.Version=$$(git describe --tags --always)" -o bin/$(BINARY) ./cmd/app

run:
	go run ./cmd/app

test:
	go test ./...
"""

_COMMON_BUILD_SH = """#!/bin/sh
set -e
go build -o bin/{{ app_name }} ./cmd/app
"""

COMMON: dict[str, Any] = {
    "description": "Standard Go project layout",
    "run_hint": "./cmd/app",
    "entries": (
        _dir("cmd/app"),
        _dir("internal/app"),
        _dir("internal/config"),
        _dir("pkg/version"),
        _dir("api"),
        _dir("configs"),
        _dir("scripts"),
        _dir("build"),
        _dir("deployments"),
        _dir("test"),
        _dir("docs"),
        _file("go.mod", GO_MOD),
        _file("cmd/app/main.go", _COMMON_MAIN),
        _file("internal/app/app.go", _COMMON_APP),
        _file("internal/config/config.go", _COMMON_CONFIG),
        _file("pkg/version/version.go", _COMMON_VERSION),
        _file("api/openapi.yaml", _COMMON_OPENAPI),
        _file("configs/config.yaml", _COMMON_CONFIG_YAML),
        _file("scripts/build.sh", _COMMON_BUILD_SH),
        _file("Makefile", _COMMON_MAKEFILE),
        _file(".gitignore", GITIGNORE),
        _file(
            "README.md",
            _readme(
                "Standard Go layout",
                "./cmd/app",
                "cmd/          main applications\n"
                "internal/     private code\n"
                "pkg/          public libraries\n"
                "api/          API definitions\n"
                "configs/      configuration templates\n"
                "scripts/      build scripts\n"
                "build/        packaging\n"
                "deployments/  deployment manifests\n"
                "test/         extra test data\n"
                "docs/         documentation",
            ),
        ),
    ),
}


# ---------------------------------------------------------------------------
# layered
# ---------------------------------------------------------------------------

_LAYERED_MAIN = """package main

import (
	"log"
	"net/http"

	"{{ module }}/internal/business/service"
	"{{ module }}/internal/data/repository"
	"{{ module }}/internal/presentation/handler"
)

func main() {
	repo := repository.NewUserRepository()
	svc := service.NewUserService(repo)

	mux := http.NewServeMux()
	handler.NewUserHandler(svc).Register(mux)

	log.Println("{{ app_name }} listening on :8080")
	log.Fatal(http.ListenAndServe(":8080", mux))
}
"""

_LAYERED_MODEL = """package model

type User struct {
	ID    int    `json:"id"`
	Name  string `json:"name"`
	Email string `json:"email"`
}
"""

_LAYERED_REPOSITORY = """package repository

import (
	"sync"

	"{{ module }}/internal/data/model"
)

type UserRepository struct {
	mu    sync.RWMutex
	users []model.User
}

func NewUserRepository() *UserRepository {
	return &UserRepository{}
}

func (r *UserRepository) Create(u model.User) model.User {
	r.mu.Lock()
	defer r.mu.Unlock()
	u.ID = len(r.users) + 1
	r.users = append(r.users, u)
	return u
}

func (r *UserRepository) FindAll() []model.User {
	r.mu.RLock()
	defer r.mu.RUnlock()
	return append([]model.User(nil), r.users...)
}
"""

_LAYERED_SERVICE = """package service

import (
	"errors"

	"{{ module }}/internal/data/model"
	"{{ module }}/internal/data/repository"
)

var ErrNameRequired = errors.New("name is required")

type UserService struct {
	repo *repository.UserRepository
}

func NewUserService(repo *repository.UserRepository) *UserService {
	return &UserService{repo: repo}
}

func (s *UserService) Create(name, email string) (model.User, error) {
	if name == "" {
		return model.User{}, ErrNameRequired
	}
	return s.repo.Create(model.User{Name: name, Email: email}), nil
}

func (s *UserService) List() []model.User {
	return s.repo.FindAll()
}
"""

_LAYERED_HANDLER = """package handler

import (
	"encoding/json"
	"net/http"

	"{{ module }}/internal/business/service"
)

type UserHandler struct {
	service *service.UserService
}

func NewUserHandler(s *service.UserService) *UserHandler {
	return &UserHandler{service: s}
}

func (h *UserHandler) Register(mux *http.ServeMux) {
	mux.HandleFunc("/users", func(w http.ResponseWriter, r *http.Request) {
		w.Header().Set("Content-Type", "application/json")
		_ = json.NewEncoder(w).Encode(h.service.List())
	})
}
"""

LAYERED: dict[str, Any] = {
    "description": "Layered architecture",
    "run_hint": "./cmd/server",
    "entries": (
        _dir("cmd/server"),
        _dir("internal/presentation/handler"),
        _dir("internal/business/service"),
        _dir("internal/data/repository"),
        _dir("internal/data/model"),
        _file("go.mod", GO_MOD),
        _file("cmd/server/main.go", _LAYERED_MAIN),
        _file("internal/presentation/handler/user_handler.go", _LAYERED_HANDLER),
        _file("internal/business/service/user_service.go", _LAYERED_SERVICE),
        _file("internal/data/repository/user_repository.go", _LAYERED_REPOSITORY),
        _file("internal/data/model/user.go", _LAYERED_MODEL),
        _file(".gitignore", GITIGNORE),
        _file(
            "README.md",
            _readme(
                "Layered",
                "./cmd/server",
                "internal/presentation  HTTP handlers\n"
                "internal/business      services\n"
                "internal/data          models and repositories",
            ),
        ),
    ),
}


LAYOUTS: dict[str, dict[str, Any]] = {
    "flat": FLAT,
    "ddd": DDD,
    "clean": CLEAN,
    "feature": FEATURE,
    "hexagonal": HEXAGONAL,
    "modular": MODULAR,
    "monorepo": MONOREPO,
    "cqrs": CQRS,
    "onion": ONION,
    "common": COMMON,
    "layered": LAYERED,
}
